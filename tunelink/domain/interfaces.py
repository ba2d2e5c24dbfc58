"""Protocols for musical entities.

Lets infrastructure code accept any entity-like object without depending on
the concrete entity classes.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class MusicalEntityInterface(Protocol):
    """Contract shared by every musical entity kind."""

    def get_type(self) -> str:
        """Type tag of the entity (``track``, ``album``, ...)."""
        ...

    def to_dict(self) -> dict[str, Any]:
        """Generic representation, always holding a ``type`` key."""
        ...

    def add_link(self, link: str) -> Self: ...

    def add_links(self, links: Iterable[str]) -> Self: ...

    def get_links(self) -> list[str]: ...

    def count_links(self) -> int: ...

    def is_introspected(self) -> bool: ...

    def set_introspected(self, metadata: Mapping[str, str] | None = None) -> Self:
        """Mark as introspected, replacing metadata when given."""
        ...

    def get_metadata(self) -> dict[str, str]: ...
