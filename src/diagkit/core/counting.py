"""Frequency counting over arbitrary hashable values."""

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def count(items: Iterable[T]) -> list[tuple[int, T]]:
    """Count how often each value appears in items.

    Args:
        items: Any iterable of hashable values.

    Returns:
        List of (count, value) pairs, in no particular order.
    """
    return [(n, value) for value, n in Counter(items).items()]
