"""Resolution of human-friendly process references to psutil.Process."""

from typing import Any

import psutil


def to_process(ref: Any) -> psutil.Process | None:
    """Resolve a reference to a live process.

    Accepted references:

    - a ``psutil.Process``, returned as is
    - an ``int`` pid
    - a string of ASCII digits, read as a pid
    - any other string, matched against process names (lowest pid wins)

    Returns:
        The process, or None when nothing matches, the pid is gone or
        the pid is negative.

    Raises:
        TypeError: If the reference is of an unsupported type.
    """
    if isinstance(ref, psutil.Process):
        return ref
    if isinstance(ref, str) and ref.strip().isascii() and ref.strip().isdigit():
        ref = int(ref)
    if isinstance(ref, int) and not isinstance(ref, bool):
        if ref < 0:
            return None
        try:
            return psutil.Process(ref)
        except (psutil.NoSuchProcess, ValueError):
            return None
    if isinstance(ref, str):
        return _by_name(ref)
    raise TypeError(f"cannot resolve {type(ref).__name__} to a process")


def _by_name(name: str) -> psutil.Process | None:
    matches = [
        proc
        for proc in psutil.process_iter(["name"])
        if proc.info["name"] == name
    ]
    if not matches:
        return None
    return min(matches, key=lambda p: p.pid)
