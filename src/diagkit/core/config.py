"""Sampling configuration.

Settings are plain frozen dataclasses validated on construction. Values may
be read from the environment with SamplingConfig.from_env():

- ``DIAGKIT_SAMPLE_COUNT``: number of probe calls per run (default 5)
- ``DIAGKIT_SAMPLE_INTERVAL_MS``: delay after each call in ms (default 1000)

Unset variables fall back to the defaults; malformed values raise
ValueError naming the offending variable.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from diagkit.core.sampler import time_fold, time_map
from diagkit.core.validation import check_count, check_interval

ENV_COUNT = "DIAGKIT_SAMPLE_COUNT"
ENV_INTERVAL_MS = "DIAGKIT_SAMPLE_INTERVAL_MS"

DEFAULT_COUNT = 5
DEFAULT_INTERVAL_MS = 1000


@dataclass(frozen=True)
class SamplingConfig:
    """How many samples to take and how far apart.

    Attributes:
        count: Number of probe calls, >= 0.
        interval_ms: Delay after each call in milliseconds, > 0.
    """

    count: int = DEFAULT_COUNT
    interval_ms: float = DEFAULT_INTERVAL_MS

    def __post_init__(self) -> None:
        check_count(self.count)
        check_interval(self.interval_ms)

    def time_map(self, fun: Any, state: Any, map_fun: Any) -> list[Any]:
        """Run time_map with this config's count and interval."""
        return time_map(self.count, self.interval_ms, fun, state, map_fun)

    def time_fold(self, fun: Any, state: Any, fold_fun: Any, init: Any) -> Any:
        """Run time_fold with this config's count and interval."""
        return time_fold(self.count, self.interval_ms, fun, state, fold_fun, init)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SamplingConfig":
        """Build a config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to os.environ.
        """
        env = os.environ if environ is None else environ
        count = _parse_env(env, ENV_COUNT, int, DEFAULT_COUNT)
        interval_ms = _parse_env(env, ENV_INTERVAL_MS, float, DEFAULT_INTERVAL_MS)
        try:
            return cls(count=count, interval_ms=interval_ms)
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid sampling config from environment: {e}") from e


def _parse_env(env: Mapping[str, str], name: str, cast: type, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
