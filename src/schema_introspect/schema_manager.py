from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from .asset_filter import AssetFilter
from .columns import ColumnBuilder
from .config import SchemaConfig, load_config
from .db import QueryExecutor
from .logging_utils import configure_logging, log_extra
from .models import Sequence, TableColumns
from .platforms import Platform, PostgreSQLPlatform
from .sequences import SequenceAggregator, qualified_name


class SchemaManager:
    """Introspect tables, columns and sequences through a QueryExecutor.

    Queries run strictly one after another on the caller's executor; nothing is
    cached, so every call re-queries the catalog. Executor failures propagate
    unchanged.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        platform: Platform,
        config: SchemaConfig | None = None,
    ) -> None:
        self._executor = executor
        self._platform = platform
        self._config = config or SchemaConfig()
        # an invalid pattern raises ConfigError here, before any query runs
        self._asset_filter = AssetFilter(self._config.filter_schema_assets_expression)
        self._columns = ColumnBuilder(platform)
        self._sequences = SequenceAggregator()
        self._log = logging.getLogger(__name__)

    @property
    def platform(self) -> Platform:
        return self._platform

    @property
    def asset_filter(self) -> AssetFilter:
        return self._asset_filter

    def list_sequences(self, database: str | None = None) -> list[Sequence]:
        database = database or self._config.database
        identity_rows = self._fetch_all(self._platform.list_sequences_sql(database))

        # One property query per identity row, in identity order. Filtering
        # only happens once every query has completed.
        property_rows: list[Mapping[str, Any]] = []
        for identity in identity_rows:
            sql = self._platform.sequence_properties_sql(
                identity["schemaname"] or None, identity["relname"]
            )
            property_rows.append(self._fetch_all(sql)[0])

        sequences = self._sequences.aggregate(
            identity_rows, property_rows, self._asset_filter
        )
        self._log.info(
            "Sequences listed",
            extra=log_extra(
                database=database,
                candidates=len(identity_rows),
                visible=len(sequences),
            ),
        )
        return sequences

    def list_table_columns(self, table: str, database: str | None = None) -> TableColumns:
        database = database or self._config.database
        rows = self._fetch_all(self._platform.list_table_columns_sql(table, database))

        columns: TableColumns = {}
        for row in rows:
            column = self._columns.build(row)
            columns[column.name.lower()] = column

        self._log.info(
            "Table columns listed",
            extra=log_extra(table=table, column_count=len(columns)),
        )
        return columns

    def list_table_names(self) -> list[str]:
        rows = self._fetch_all(self._platform.list_tables_sql())
        names = [qualified_name(row["schema_name"], row["table_name"]) for row in rows]
        visible = self._asset_filter.filter_names(names)
        self._log.info(
            "Tables listed",
            extra=log_extra(candidates=len(names), visible=len(visible)),
        )
        return visible

    def _fetch_all(self, sql: str) -> list[Mapping[str, Any]]:
        return list(self._executor.fetch_all(sql))


def create_schema_manager(
    config_path: str | Path,
    executor: QueryExecutor,
    platform: Platform | None = None,
) -> SchemaManager:
    """Build a SchemaManager from a YAML config file.

    Args:
        config_path: Path to the YAML configuration.
        executor: Caller-owned query executor.
        platform: Engine description. Defaults to PostgreSQL.

    Returns:
        SchemaManager: Manager using the configured asset filter and database.
    """
    config = load_config(config_path)
    configure_logging(config.observability.log_level)
    return SchemaManager(executor, platform or PostgreSQLPlatform(), config.schema)
