"""Database schema introspection and catalog normalization."""

from .asset_filter import AssetFilter
from .columns import ColumnBuilder
from .config import AppConfig, SchemaConfig, load_config
from .db import DBAPIExecutor, QueryExecutor
from .defaults import DefaultValueNormalizer
from .errors import ConfigError, DataAccessError, TypeMappingError
from .models import Column, Sequence, TableColumns
from .platforms import Platform, PostgreSQLPlatform
from .schema_manager import SchemaManager, create_schema_manager
from .sequences import SequenceAggregator, qualified_name

__all__ = [
    "AppConfig",
    "AssetFilter",
    "Column",
    "ColumnBuilder",
    "ConfigError",
    "DataAccessError",
    "DBAPIExecutor",
    "DefaultValueNormalizer",
    "Platform",
    "PostgreSQLPlatform",
    "QueryExecutor",
    "SchemaConfig",
    "SchemaManager",
    "Sequence",
    "SequenceAggregator",
    "TableColumns",
    "TypeMappingError",
    "create_schema_manager",
    "load_config",
    "qualified_name",
]
