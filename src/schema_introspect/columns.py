from __future__ import annotations

import re
from typing import Any

from .defaults import DefaultValueNormalizer
from .models import Column, RawRow
from .platforms import Platform

_LENGTH_RE = re.compile(r".*\(([0-9]*)\).*")
_PRECISION_SCALE_RE = re.compile(r"[A-Za-z ]+\(([0-9]+),([0-9]+)\)")

_NO_LENGTH_TYPES = {
    "smallint",
    "int2",
    "int",
    "int4",
    "integer",
    "bigint",
    "int8",
    "bool",
    "boolean",
    "year",
}
_FIXED_TYPES = {"char", "bpchar"}
_VARIABLE_TYPES = {"text", "varchar", "interval", "_varchar"}
_NUMERIC_TYPES = {
    "float",
    "float4",
    "float8",
    "double",
    "double precision",
    "real",
    "decimal",
    "money",
    "numeric",
}


class ColumnBuilder:
    """Assemble a portable :class:`Column` from one raw catalog column row."""

    def __init__(self, platform: Platform, normalizer: DefaultValueNormalizer | None = None) -> None:
        self._platform = platform
        self._normalizer = normalizer or DefaultValueNormalizer(
            now_function=platform.now_function,
            cast_literal_pattern=platform.cast_literal_pattern,
        )

    @property
    def normalizer(self) -> DefaultValueNormalizer:
        return self._normalizer

    def build(self, row: RawRow) -> Column:
        row = {str(k).lower(): v for k, v in row.items()}

        db_type = str(row["type"]).lower()
        complete_type = row.get("complete_type") or ""
        domain_type = row.get("domain_type")
        if domain_type and not self._platform.has_type_mapping(db_type):
            db_type = str(domain_type).lower()
            complete_type = row.get("domain_complete_type") or complete_type

        portable_type = self._platform.portable_type(db_type)

        length = row.get("length")
        if db_type in ("varchar", "bpchar"):
            match = _LENGTH_RE.match(complete_type)
            if match and match.group(1):
                length = match.group(1)
        length = _positive_int(length)

        fixed: bool | None = None
        precision: int | None = None
        scale: int | None = None
        if db_type in _NO_LENGTH_TYPES:
            length = None
        elif db_type in _FIXED_TYPES:
            fixed = True
        elif db_type in _VARIABLE_TYPES:
            fixed = False
        elif db_type in _NUMERIC_TYPES:
            match = _PRECISION_SCALE_RE.search(complete_type)
            if match:
                precision = int(match.group(1))
                scale = int(match.group(2))
                length = None

        raw_default = row["default"]
        sequence = self._normalizer.sequence_name(raw_default)
        default = self._normalizer.normalize(
            raw_default,
            portable_type,
            self._platform.current_timestamp_sql(),
        )

        return Column(
            name=_unquote(str(row["field"])),
            type=portable_type,
            length=length,
            precision=precision,
            scale=scale,
            fixed=fixed,
            notnull=bool(row["isnotnull"]),
            default=default,
            autoincrement=sequence is not None,
            sequence=sequence,
            primary=row.get("pri") == "t",
            collation=row.get("collation") or None,
            comment=row.get("comment") or None,
        )


def _positive_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    try:
        number = int(value)
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def _unquote(name: str) -> str:
    if len(name) > 1 and name[0] == '"' and name[-1] == '"':
        return name[1:-1].replace('""', '"')
    return name
