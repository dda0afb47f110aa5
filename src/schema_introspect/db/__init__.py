"""Query execution adapters."""

from .client import DBAPIExecutor, QueryExecutor

__all__ = ["DBAPIExecutor", "QueryExecutor"]
