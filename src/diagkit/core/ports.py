"""Port interfaces for attribute providers.

These protocols define the contracts that host adapters must implement.
The core depends only on these interfaces, not on concrete implementations.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from diagkit.core.models import Measurement

S = TypeVar("S")
R = TypeVar("R")

# A probe takes the current state and returns (result, new_state).
Probe = Callable[[S], tuple[R, S]]


@runtime_checkable
class AttributeProvider(Protocol):
    """Port for reading per-entity attributes from a live host.

    Adapters implementing this protocol supply (key, value, metadata)
    measurements for every entity of one kind.
    Examples: ProcessAttributes, InterfaceAttributes.
    """

    def attrs(self, attr: str) -> list[Measurement]:
        """Read the given attribute for every live entity.

        Entities that disappear while being read are skipped.
        """
        ...

    def entity_attrs(self, attr: str, entity: Any) -> Measurement | None:
        """Read the given attribute for a single entity.

        Returns:
            The measurement, or None when the entity no longer exists.
        """
        ...
