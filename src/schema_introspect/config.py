from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

from .asset_filter import compile_filter_expression
from .errors import ConfigError


@dataclass
class SchemaConfig:
    filter_schema_assets_expression: str | None = None
    database: str | None = None


@dataclass
class ObservabilityConfig:
    log_level: str = "info"


@dataclass
class AppConfig:
    schema: SchemaConfig = field(default_factory=SchemaConfig)
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)


_LOG_LEVELS = {"debug", "info", "warning", "error", "critical"}


def _resolve_env(value: Any, env: Mapping[str, str]) -> Any:
    if isinstance(value, str):
        expanded = os.path.expandvars(value)
        if expanded.startswith("${") and expanded.endswith("}"):
            key = expanded[2:-1]
            if key not in env:
                raise ConfigError(f"Environment variable {key} is required but not set")
            return env[key]
        return expanded
    if isinstance(value, list):
        return [_resolve_env(v, env) for v in value]
    if isinstance(value, dict):
        return {k: _resolve_env(v, env) for k, v in value.items()}
    return value


def _section(resolved: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = resolved.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section {name} must be a mapping")
    return section


def _optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{field_name} must be a string")
    return value or None


def load_config(path: str | Path, env: Mapping[str, str] | None = None) -> AppConfig:
    env = env or os.environ
    try:
        text = Path(path).read_text()
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    try:
        raw = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError("Config root must be a mapping")
    resolved = _resolve_env(raw, env)

    schema_raw = _section(resolved, "schema")
    observability_raw = _section(resolved, "observability")

    expression = _optional_str(
        schema_raw.get("filter_schema_assets_expression"),
        "filter_schema_assets_expression",
    )
    # fail at load time, never during introspection
    compile_filter_expression(expression)

    schema = SchemaConfig(
        filter_schema_assets_expression=expression,
        database=_optional_str(schema_raw.get("database"), "database"),
    )

    log_level = str(observability_raw.get("log_level", "info")).lower()
    if log_level not in _LOG_LEVELS:
        raise ConfigError(f"Unsupported log level: {log_level}")
    observability = ObservabilityConfig(log_level=log_level)

    return AppConfig(schema=schema, observability=observability)
