"""Engine descriptions consumed by the schema manager."""

from .base import Platform, quote_literal
from .postgresql import PostgreSQLPlatform

__all__ = ["Platform", "PostgreSQLPlatform", "quote_literal"]
