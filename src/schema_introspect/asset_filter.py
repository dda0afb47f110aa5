"""Visibility policy for named schema assets (tables, sequences)."""

from __future__ import annotations

import re
from typing import Iterable

from .errors import ConfigError


def compile_filter_expression(expression: str | None) -> re.Pattern[str] | None:
    """Compile a schema asset filter expression.

    Raises:
        ConfigError: If the expression is not a valid regular expression.
    """
    if expression is None:
        return None
    if not isinstance(expression, str):
        raise ConfigError("filter_schema_assets_expression must be a string")
    try:
        return re.compile(expression)
    except re.error as exc:
        raise ConfigError(
            f"Invalid filter_schema_assets_expression {expression!r}: {exc}"
        ) from exc


class AssetFilter:
    """Decide whether a qualified asset name is visible.

    The pattern is matched anywhere in the fully qualified name, so a policy can
    select by schema (``^sales\\.``), by object name (``_audit$``) or both.
    """

    def __init__(self, expression: str | None = None) -> None:
        self._expression = expression
        self._pattern = compile_filter_expression(expression)

    @property
    def expression(self) -> str | None:
        return self._expression

    def is_visible(self, qualified_name: str) -> bool:
        if self._pattern is None:
            return True
        return self._pattern.search(qualified_name) is not None

    def filter_names(self, names: Iterable[str]) -> list[str]:
        return [name for name in names if self.is_visible(name)]

    def __repr__(self) -> str:
        return f"AssetFilter(expression={self._expression!r})"
