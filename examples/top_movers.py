"""Report which processes grew the most over a few sampling intervals.

Run with:
    python examples/top_movers.py [attribute]

Environment:
    DIAGKIT_SAMPLE_COUNT        - number of intervals (default 5)
    DIAGKIT_SAMPLE_INTERVAL_MS  - interval length in ms (default 1000)

The attribute is any of the process attributes (memory, num_threads,
ctx_switches, ...). Deltas of every interval are folded into a running
total per pid and the ten largest are printed, along with the most
common process names among them.
"""

import logging
import sys

from diagkit import SamplingConfig, count, delta_probe, get_logger
from diagkit.adapters.host import ProcessAttributes

logger = get_logger(__name__)


def accumulate(deltas: list, totals: dict) -> dict:
    """Add one interval's deltas to the running totals."""
    for pid, value, metadata in deltas:
        growth, name = totals.get(pid, (0, metadata[0]))
        totals[pid] = (growth + value, name)
    return totals


def main(attr: str = "memory") -> None:
    config = SamplingConfig.from_env()
    provider = ProcessAttributes()

    def fetch() -> list:
        return provider.attrs(attr)

    logger.with_fields(attr=attr, count=config.count).info("Sampling processes")
    totals = config.time_fold(delta_probe(fetch), fetch(), accumulate, {})

    top = sorted(totals.items(), key=lambda item: item[1][0], reverse=True)[:10]
    for pid, (growth, name) in top:
        print(f"{pid:>8} {name:<24} {growth:>14}")

    for n, name in sorted(count(name for _, (_, name) in top), reverse=True):
        print(f"{name}: {n}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main(*sys.argv[1:2])
