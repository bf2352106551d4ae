"""Shared argument validation for sampling entry points.

This module holds the checks common to the sampler functions and the
sampling configuration, so both reject the same inputs with the same
messages.
"""

import math
import numbers


def check_count(n: int) -> None:
    """Reject a sample count that is not a non-negative int.

    Raises:
        TypeError: If n is not an int (bools are rejected too).
        ValueError: If n is negative.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")


def check_interval(interval_ms: float) -> None:
    """Reject an interval that is not a positive number of milliseconds.

    Raises:
        ValueError: If interval_ms is not a finite real number > 0.
    """
    if (
        isinstance(interval_ms, bool)
        or not isinstance(interval_ms, numbers.Real)
        or not math.isfinite(interval_ms)
        or interval_ms <= 0
    ):
        raise ValueError(f"interval_ms must be a positive number, got {interval_ms!r}")


def check_callable(name: str, fn: object) -> None:
    """Raise TypeError naming the argument if fn is not callable."""
    if not callable(fn):
        raise TypeError(f"{name} must be callable")
