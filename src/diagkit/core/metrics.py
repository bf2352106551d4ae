"""Metric helper functions for exporting measurements as MetricSample objects."""

import time
from collections.abc import Hashable, Iterable
from typing import Any

from diagkit.core.models import MetricSample


def gauge(
    name: str,
    value: float,
    labels: dict[str, str] | None = None,
) -> MetricSample:
    """Create a gauge metric sample.

    Args:
        name: Metric name (e.g., "process_memory_bytes")
        value: Current gauge value
        labels: Optional dimension labels

    Returns:
        MetricSample with current timestamp
    """
    return MetricSample(
        name=name,
        timestamp=time.time(),
        value=value,
        labels=labels or {},
    )


def to_samples(
    name: str,
    measurements: Iterable[tuple[Hashable, Any, Any]],
    labels: dict[str, str] | None = None,
) -> list[MetricSample]:
    """Convert measurements or deltas into gauge samples.

    Every sample gets a ``key`` label holding the entity key, on top of
    the shared labels. All samples share a single timestamp.

    Args:
        name: Metric name applied to every sample
        measurements: (key, value, metadata) triples; metadata is ignored
        labels: Optional labels added to every sample

    Returns:
        One MetricSample per measurement, in input order
    """
    timestamp = time.time()
    base_labels = labels or {}
    return [
        MetricSample(
            name=name,
            timestamp=timestamp,
            value=float(value),
            labels={**base_labels, "key": str(key)},
        )
        for key, value, _ in measurements
    ]
