"""Periodic sampling of stateful probes.

A probe is called, the caller sleeps for the interval, and the probe is
called again with the state it returned. The delay follows every call,
including the last one, so a run of ``n`` samples takes at least
``n * interval_ms`` milliseconds.

The async variants suspend with ``asyncio.sleep`` instead of blocking the
thread. Cancelling the task aborts the run between calls and nothing is
returned.
"""

import asyncio
import time
from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

from diagkit.adapters.logging import get_logger
from diagkit.core.diff import sliding_window
from diagkit.core.models import Measurement
from diagkit.core.ports import Probe
from diagkit.core.validation import check_callable, check_count, check_interval

logger = get_logger(__name__)

S = TypeVar("S")
R = TypeVar("R")
U = TypeVar("U")
A = TypeVar("A")


def _validate(n: int, interval_ms: float, **fns: object) -> None:
    check_count(n)
    check_interval(interval_ms)
    for name, fn in fns.items():
        check_callable(name, fn)


def time_map(
    n: int,
    interval_ms: float,
    fun: Probe[S, R],
    state: S,
    map_fun: Callable[[R], U],
) -> list[U]:
    """Call ``fun`` every ``interval_ms`` milliseconds, ``n`` times.

    Each result is passed through ``map_fun`` and collected.

    Args:
        n: Number of probe calls. Zero returns immediately.
        interval_ms: Delay after every call, in milliseconds.
        fun: Probe taking a state and returning (result, new_state).
        state: Initial state handed to the first call.
        map_fun: Applied to every result.

    Returns:
        Mapped results in call order.

    Raises:
        TypeError: If n is not an int or a function is not callable.
        ValueError: If n is negative or interval_ms is not positive.
    """
    _validate(n, interval_ms, fun=fun, map_fun=map_fun)
    logger.with_fields(n=n, interval_ms=interval_ms).debug("Starting time_map")
    results: list[U] = []
    for tick in range(n):
        res, state = fun(state)
        time.sleep(interval_ms / 1000)
        results.append(map_fun(res))
        logger.with_fields(tick=tick).debug("Sampled")
    return results


def time_fold(
    n: int,
    interval_ms: float,
    fun: Probe[S, R],
    state: S,
    fold_fun: Callable[[R, A], A],
    init: A,
) -> A:
    """Call ``fun`` every ``interval_ms`` milliseconds and fold the results.

    Results are combined left to right as ``acc = fold_fun(result, acc)``,
    starting from ``init``.

    Returns:
        The final accumulator, or ``init`` unchanged when n is zero.

    Raises:
        TypeError: If n is not an int or a function is not callable.
        ValueError: If n is negative or interval_ms is not positive.
    """
    _validate(n, interval_ms, fun=fun, fold_fun=fold_fun)
    logger.with_fields(n=n, interval_ms=interval_ms).debug("Starting time_fold")
    acc = init
    for tick in range(n):
        res, state = fun(state)
        time.sleep(interval_ms / 1000)
        acc = fold_fun(res, acc)
        logger.with_fields(tick=tick).debug("Sampled")
    return acc


def sample(interval_ms: float, fun: Callable[[], R]) -> tuple[R, R]:
    """Run ``fun`` once, wait ``interval_ms``, run it again.

    Returns:
        Tuple of (first, second) results.
    """
    check_interval(interval_ms)
    check_callable("fun", fun)
    first = fun()
    time.sleep(interval_ms / 1000)
    second = fun()
    return first, second


def delta_probe(
    fetch: Callable[[], Iterable[tuple[Hashable, Any, Any]]],
) -> Probe[list[Measurement], list[Measurement]]:
    """Build a probe that reports deltas between successive snapshots.

    The probe state is the previous snapshot. Each call fetches a new
    snapshot, diffs it against the state, and keeps it as the next state.
    Seed the state with an initial ``fetch()`` to get true deltas on the
    first tick; an empty seed makes the first tick report raw values.

    Example:
        ```python
        provider = ProcessAttributes()
        fetch = lambda: provider.attrs("memory")
        deltas = time_map(5, 1000, delta_probe(fetch), fetch(), list)
        ```
    """
    check_callable("fetch", fetch)

    def probe(previous: list[Measurement]) -> tuple[list[Measurement], list[Measurement]]:
        current = [Measurement(*m) for m in fetch()]
        return sliding_window(previous, current), current

    return probe


async def atime_map(
    n: int,
    interval_ms: float,
    fun: Probe[S, R],
    state: S,
    map_fun: Callable[[R], U],
) -> list[U]:
    """Async variant of time_map that suspends instead of blocking."""
    _validate(n, interval_ms, fun=fun, map_fun=map_fun)
    logger.with_fields(n=n, interval_ms=interval_ms).debug("Starting atime_map")
    results: list[U] = []
    for tick in range(n):
        res, state = fun(state)
        await asyncio.sleep(interval_ms / 1000)
        results.append(map_fun(res))
        logger.with_fields(tick=tick).debug("Sampled")
    return results


async def atime_fold(
    n: int,
    interval_ms: float,
    fun: Probe[S, R],
    state: S,
    fold_fun: Callable[[R, A], A],
    init: A,
) -> A:
    """Async variant of time_fold that suspends instead of blocking."""
    _validate(n, interval_ms, fun=fun, fold_fun=fold_fun)
    logger.with_fields(n=n, interval_ms=interval_ms).debug("Starting atime_fold")
    acc = init
    for tick in range(n):
        res, state = fun(state)
        await asyncio.sleep(interval_ms / 1000)
        acc = fold_fun(res, acc)
        logger.with_fields(tick=tick).debug("Sampled")
    return acc
