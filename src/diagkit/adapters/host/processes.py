"""psutil adapter reading per-process attributes.

Entities are the processes of the host, keyed by pid. Metadata is a list
made of the process name, the head of its command line (when readable)
and its status, which is enough to tell processes apart in a report.
"""

import os
from collections.abc import Callable
from typing import Any

import psutil

from diagkit.adapters.host.resolve import to_process
from diagkit.adapters.logging import get_logger
from diagkit.core.models import Measurement

logger = get_logger(__name__)

# Attribute name -> reader returning a single number for one process
_READERS: dict[str, Callable[[psutil.Process], float]] = {
    "memory": lambda p: p.memory_info().rss,
    "vms": lambda p: p.memory_info().vms,
    "num_threads": lambda p: p.num_threads(),
    "num_fds": lambda p: p.num_fds(),
    "ctx_switches": lambda p: sum(p.num_ctx_switches()),
    "cpu_time": lambda p: p.cpu_times().user + p.cpu_times().system,
}

PROCESS_ATTRS = frozenset(_READERS)

# Errors meaning the process cannot be read any more (or never could)
_GONE = (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess)


def _reader(attr: str) -> Callable[[psutil.Process], float]:
    try:
        return _READERS[attr]
    except KeyError:
        raise ValueError(
            f"unknown process attribute {attr!r}, expected one of "
            f"{', '.join(sorted(_READERS))}"
        ) from None


class ProcessAttributes:
    """psutil implementation of AttributeProvider for processes.

    Args:
        include_self: Also report the calling process from attrs().
            Defaults to False.
    """

    def __init__(self, include_self: bool = False) -> None:
        self._include_self = include_self

    def attrs(self, attr: str) -> list[Measurement]:
        """Read ``attr`` for every process, skipping ones that vanish."""
        reader = _reader(attr)
        own_pid = os.getpid()
        measurements: list[Measurement] = []
        for proc in psutil.process_iter():
            if proc.pid == own_pid and not self._include_self:
                continue
            measurement = self._read(reader, proc)
            if measurement is not None:
                measurements.append(measurement)
        return measurements

    def entity_attrs(self, attr: str, entity: Any) -> Measurement | None:
        """Read ``attr`` for one process, given any reference to_process accepts.

        Returns:
            The measurement, or None when the process is gone.
        """
        reader = _reader(attr)
        proc = to_process(entity)
        if proc is None:
            return None
        return self._read(reader, proc)

    def _read(
        self, reader: Callable[[psutil.Process], float], proc: psutil.Process
    ) -> Measurement | None:
        try:
            with proc.oneshot():
                value = reader(proc)
                metadata = _describe(proc)
        except _GONE as e:
            logger.with_fields(pid=proc.pid, reason=type(e).__name__).debug(
                "Skipping unreadable process"
            )
            return None
        return Measurement(proc.pid, value, metadata)


def _describe(proc: psutil.Process) -> list[Any]:
    metadata: list[Any] = [proc.name()]
    try:
        cmdline = proc.cmdline()
    except psutil.AccessDenied:
        cmdline = []
    if cmdline:
        metadata.append(cmdline[0])
    metadata.append(proc.status())
    return metadata
