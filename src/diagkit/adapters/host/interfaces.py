"""psutil adapter reading per-network-interface counters.

Entities are network interfaces keyed by name. The aggregate attributes
``cnt`` and ``oct`` sum the receive and send packet or byte counters; the
measurement metadata keeps the individual (counter, value) pairs.
"""

from typing import Any

import psutil

from diagkit.core.models import Measurement

# Counter name -> psutil snetio field
_COUNTERS: dict[str, str] = {
    "recv_cnt": "packets_recv",
    "send_cnt": "packets_sent",
    "recv_oct": "bytes_recv",
    "send_oct": "bytes_sent",
}

_AGGREGATES: dict[str, list[str]] = {
    "cnt": ["recv_cnt", "send_cnt"],
    "oct": ["recv_oct", "send_oct"],
}

INTERFACE_ATTRS = frozenset(_COUNTERS) | frozenset(_AGGREGATES)


def _expand(attr: str) -> list[str]:
    if attr in _AGGREGATES:
        return _AGGREGATES[attr]
    if attr in _COUNTERS:
        return [attr]
    raise ValueError(
        f"unknown interface attribute {attr!r}, expected one of "
        f"{', '.join(sorted(INTERFACE_ATTRS))}"
    )


def _measure(name: str, counters: Any, attr: str) -> Measurement:
    props = [(counter, getattr(counters, _COUNTERS[counter])) for counter in _expand(attr)]
    return Measurement(name, sum(value for _, value in props), props)


class InterfaceAttributes:
    """psutil implementation of AttributeProvider for network interfaces."""

    def attrs(self, attr: str) -> list[Measurement]:
        """Read ``attr`` for every interface known to the host."""
        _expand(attr)
        per_nic = psutil.net_io_counters(pernic=True)
        return [_measure(name, counters, attr) for name, counters in per_nic.items()]

    def entity_attrs(self, attr: str, entity: Any) -> Measurement | None:
        """Read ``attr`` for one interface by name.

        Returns:
            The measurement, or None when the interface does not exist.
        """
        _expand(attr)
        counters = psutil.net_io_counters(pernic=True).get(entity)
        if counters is None:
            return None
        return _measure(entity, counters, attr)


_MISSING = object()


def interface_list(attr: str, value: Any = _MISSING) -> list[Any]:
    """List interfaces with one of their counters.

    ``interface_list(attr)`` returns (name, value) pairs for every
    interface. ``interface_list(attr, value)`` returns only the names of
    interfaces whose counter equals ``value``.
    """
    pairs = [(m.key, m.value) for m in InterfaceAttributes().attrs(attr)]
    if value is _MISSING:
        return pairs
    return [name for name, current in pairs if current == value]
