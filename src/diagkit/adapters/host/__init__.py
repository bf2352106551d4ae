"""Host adapters implementing AttributeProvider with psutil."""

from diagkit.adapters.host.interfaces import (
    INTERFACE_ATTRS,
    InterfaceAttributes,
    interface_list,
)
from diagkit.adapters.host.processes import PROCESS_ATTRS, ProcessAttributes
from diagkit.adapters.host.resolve import to_process

__all__ = [
    "INTERFACE_ATTRS",
    "PROCESS_ATTRS",
    "InterfaceAttributes",
    "ProcessAttributes",
    "interface_list",
    "to_process",
]
