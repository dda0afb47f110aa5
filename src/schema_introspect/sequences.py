from __future__ import annotations

from typing import Sequence as SequenceType

from .asset_filter import AssetFilter
from .models import RawRow, Sequence


def qualified_name(namespace: str | None, name: str) -> str:
    if namespace:
        return f"{namespace}.{name}"
    return name


class SequenceAggregator:
    """Merge sequence identity rows with their numeric property rows.

    ``property_rows[i]`` holds ``min_value``/``increment_by`` for
    ``identity_rows[i]``. The pairing is positional: both row sets come from
    queries issued in one loop, one property query per identity row, so the
    two lists must have the same length. Filtering happens after pairing.
    """

    def aggregate(
        self,
        identity_rows: SequenceType[RawRow],
        property_rows: SequenceType[RawRow],
        asset_filter: AssetFilter,
    ) -> list[Sequence]:
        if len(identity_rows) != len(property_rows):
            raise ValueError(
                f"Got {len(property_rows)} sequence property rows for "
                f"{len(identity_rows)} sequences"
            )

        sequences: list[Sequence] = []
        for identity, properties in zip(identity_rows, property_rows):
            name = qualified_name(identity["schemaname"], identity["relname"])
            if not asset_filter.is_visible(name):
                continue
            sequences.append(
                Sequence(
                    name=name,
                    min_value=int(properties["min_value"]),
                    increment_by=int(properties["increment_by"]),
                )
            )
        return sequences
