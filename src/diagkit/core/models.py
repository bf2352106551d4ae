"""Core domain models for diagnostic measurements."""

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple


class Measurement(NamedTuple):
    """A single keyed reading taken from a live entity.

    Attributes:
        key: Identifies the entity within one snapshot (pid, interface name).
        value: Numeric quantity; must support subtraction.
        metadata: Opaque payload carried through unmodified.
    """

    key: Hashable
    value: Any
    metadata: Any = None


# A snapshot is an ordered sequence of measurements taken at one instant.
Snapshot = Sequence[Measurement]


@dataclass(frozen=True)
class MetricSample:
    """A single metric measurement.

    Attributes:
        name: Metric name (e.g., process_memory_bytes).
        timestamp: Unix timestamp in seconds.
        value: The metric value.
        labels: Key-value pairs for metric dimensions.
    """

    name: str
    timestamp: float
    value: float
    labels: dict[str, str] = field(default_factory=dict)
