"""Comparison of two keyed snapshots."""

from collections.abc import Hashable, Iterable
from typing import Any

from diagkit.core.models import Measurement


def sliding_window(
    first: Iterable[tuple[Hashable, Any, Any]],
    last: Iterable[tuple[Hashable, Any, Any]],
) -> list[Measurement]:
    """Compare two snapshots and return per-key deltas.

    The table is seeded from ``first`` (a later duplicate key replaces an
    earlier one). Each measurement of ``last`` then updates its key in
    order: a key with no baseline keeps its raw value, otherwise the entry
    becomes ``value - old``. Duplicate keys in ``last`` are therefore
    subtracted from the already-updated entry, not from the seed.

    Keys that only appear in ``first`` are dropped from the result; a
    vanished entity has no current reading to report.

    Args:
        first: The earlier snapshot, as (key, value, metadata) triples.
        last: The later snapshot, as (key, value, metadata) triples.

    Returns:
        Measurements carrying the delta and the later metadata, in no
        particular order.
    """
    table: dict[Hashable, tuple[Any, Any]] = {
        key: (value, metadata) for key, value, metadata in first
    }
    seen: dict[Hashable, None] = {}
    for key, value, metadata in last:
        if key in table:
            old, _ = table[key]
            table[key] = (value - old, metadata)
        else:
            table[key] = (value, metadata)
        seen[key] = None
    return [Measurement(key, *table[key]) for key in seen]


diff = sliding_window
