"""Rewrite engine-native column default expressions into portable ones."""

from __future__ import annotations

import re
from typing import Iterable

TEMPORAL_TYPES = frozenset({"datetime", "datetimetz"})

_NEXTVAL_RE = re.compile(r"^nextval\('(.*)'(::.*)?\)$")


class DefaultValueNormalizer:
    """Normalize raw default expressions for one catalog dialect.

    The engine spelling of the now-function and the shape of a cast literal are
    supplied by the caller, so the same rules serve any dialect.

    Args:
        now_function: Exact default expression the engine reports for "current
            time at evaluation", e.g. ``now()``.
        cast_literal_pattern: Regex whose first group captures the payload of a
            single quoted literal, optionally cast, such as ``'abc'::text``.
            Anything that is not one whole literal must not match.
        temporal_types: Portable types for which the now-function is rewritten
            to the platform's current-timestamp keyword.
    """

    def __init__(
        self,
        now_function: str,
        cast_literal_pattern: str | re.Pattern[str],
        temporal_types: Iterable[str] = TEMPORAL_TYPES,
    ) -> None:
        self.now_function = now_function
        if isinstance(cast_literal_pattern, str):
            cast_literal_pattern = re.compile(cast_literal_pattern, re.DOTALL)
        self._cast_literal = cast_literal_pattern
        self.temporal_types = frozenset(temporal_types)

    def normalize(
        self,
        raw_default: str | None,
        portable_type: str,
        current_timestamp_sql: str,
    ) -> str | None:
        if raw_default is None:
            return None
        if raw_default == self.now_function and portable_type in self.temporal_types:
            return current_timestamp_sql
        match = self._cast_literal.match(raw_default)
        if match:
            return match.group(1)
        return raw_default

    @staticmethod
    def sequence_name(raw_default: str | None) -> str | None:
        """Return the sequence feeding a ``nextval('seq'::regclass)`` default."""
        if raw_default is None:
            return None
        match = _NEXTVAL_RE.match(raw_default)
        if match is None:
            return None
        return match.group(1)
