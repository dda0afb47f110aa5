from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

from ..errors import TypeMappingError


def quote_literal(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


class Platform(ABC):
    """Describes one database engine to the introspection core.

    A platform owns everything engine specific: the engine-to-portable type
    mapping, how the engine spells "now" in column defaults, the shape of a
    cast literal and the catalog SQL text.
    """

    name: str = "generic"
    now_function: str = "now()"
    cast_literal_pattern: str = r"^'((?:[^']|'')*)'(?:::[^']+)?$"
    type_mapping: Mapping[str, str] = {}

    def current_timestamp_sql(self) -> str:
        return "CURRENT_TIMESTAMP"

    def has_type_mapping(self, db_type: str) -> bool:
        return db_type.lower() in self.type_mapping

    def portable_type(self, db_type: str) -> str:
        try:
            return self.type_mapping[db_type.lower()]
        except KeyError:
            raise TypeMappingError(
                f"Unknown {self.name} database type {db_type} requested"
            ) from None

    @abstractmethod
    def list_sequences_sql(self, database: str | None) -> str:
        ...

    @abstractmethod
    def sequence_properties_sql(self, namespace: str | None, name: str) -> str:
        ...

    @abstractmethod
    def list_table_columns_sql(self, table: str, database: str | None = None) -> str:
        ...

    @abstractmethod
    def list_tables_sql(self) -> str:
        ...
