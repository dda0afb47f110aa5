from pathlib import Path

import pytest

from schema_introspect.config import load_config
from schema_introspect.errors import ConfigError


def write_config(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "config.yml"
    path.write_text(content)
    return path


def test_load_full_config(tmp_path: Path) -> None:
    cfg_path = write_config(
        tmp_path,
        """
schema:
  filter_schema_assets_expression: "^schema"
  database: appdb
observability:
  log_level: DEBUG
""",
    )

    config = load_config(cfg_path)
    assert config.schema.filter_schema_assets_expression == "^schema"
    assert config.schema.database == "appdb"
    assert config.observability.log_level == "debug"


def test_defaults_when_sections_missing(tmp_path: Path) -> None:
    cfg_path = write_config(tmp_path, "")

    config = load_config(cfg_path)
    assert config.schema.filter_schema_assets_expression is None
    assert config.schema.database is None
    assert config.observability.log_level == "info"


def test_env_substitution(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEMA_FILTER", "^sales\\.")
    cfg_path = write_config(
        tmp_path,
        """
schema:
  filter_schema_assets_expression: ${SCHEMA_FILTER}
""",
    )

    config = load_config(cfg_path)
    assert config.schema.filter_schema_assets_expression == "^sales\\."


def test_missing_env_variable(tmp_path: Path) -> None:
    cfg_path = write_config(
        tmp_path,
        """
schema:
  database: ${INTROSPECT_TEST_UNSET_DATABASE}
""",
    )
    with pytest.raises(ConfigError):
        load_config(cfg_path, env={"UNRELATED": "1"})


def test_invalid_filter_expression_fails_at_load(tmp_path: Path) -> None:
    cfg_path = write_config(
        tmp_path,
        """
schema:
  filter_schema_assets_expression: "^(unclosed"
""",
    )
    with pytest.raises(ConfigError):
        load_config(cfg_path)


def test_non_string_filter_expression(tmp_path: Path) -> None:
    cfg_path = write_config(
        tmp_path,
        """
schema:
  filter_schema_assets_expression: [a, b]
""",
    )
    with pytest.raises(ConfigError):
        load_config(cfg_path)


def test_section_must_be_mapping(tmp_path: Path) -> None:
    cfg_path = write_config(tmp_path, "schema: just-a-string\n")
    with pytest.raises(ConfigError):
        load_config(cfg_path)


def test_invalid_log_level(tmp_path: Path) -> None:
    cfg_path = write_config(
        tmp_path,
        """
observability:
  log_level: chatty
""",
    )
    with pytest.raises(ConfigError):
        load_config(cfg_path)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yml")


def test_invalid_yaml(tmp_path: Path) -> None:
    cfg_path = write_config(tmp_path, "schema: [unterminated\n")
    with pytest.raises(ConfigError):
        load_config(cfg_path)
