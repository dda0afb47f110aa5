"""Portable schema model produced by introspection.

Entities are frozen value objects; none of them keeps a reference to the
connection or to the raw catalog rows they were built from.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

RawRow = Mapping[str, Any]


@dataclass(frozen=True)
class Column:
    name: str
    type: str
    length: int | None = None
    precision: int | None = None
    scale: int | None = None
    fixed: bool | None = None
    notnull: bool = False
    default: str | None = None
    autoincrement: bool = False
    sequence: str | None = None
    primary: bool = False
    collation: str | None = None
    comment: str | None = None


@dataclass(frozen=True)
class Sequence:
    name: str
    min_value: int
    increment_by: int

    @property
    def namespace(self) -> str | None:
        if "." not in self.name:
            return None
        return self.name.split(".", 1)[0]

    @property
    def short_name(self) -> str:
        if "." not in self.name:
            return self.name
        return self.name.split(".", 1)[1]


TableColumns = dict[str, Column]
