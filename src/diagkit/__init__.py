"""diagkit - snapshot diffing and periodic sampling for live diagnostics."""

from diagkit.adapters.logging import get_logger
from diagkit.core.config import SamplingConfig
from diagkit.core.counting import count
from diagkit.core.diff import diff, sliding_window
from diagkit.core.metrics import gauge, to_samples
from diagkit.core.models import Measurement, MetricSample
from diagkit.core.ports import AttributeProvider
from diagkit.core.sampler import (
    atime_fold,
    atime_map,
    delta_probe,
    sample,
    time_fold,
    time_map,
)

__all__ = [
    "AttributeProvider",
    "Measurement",
    "MetricSample",
    "SamplingConfig",
    "atime_fold",
    "atime_map",
    "count",
    "delta_probe",
    "diff",
    "gauge",
    "get_logger",
    "sample",
    "sliding_window",
    "time_fold",
    "time_map",
    "to_samples",
]
