"""Base musical entity shared by every entity kind.

An entity collects the links found for it across music services and, once
introspected, the metadata describing it. Mutators return the entity itself
so calls can be chained.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, ClassVar, Self

from attrs import define, field

from .shared import clean_title, extract_title_markers


@define(slots=True)
class MusicalEntity(ABC):
    """Mutable base for tracks, albums and other musical entities.

    Example:
        ```python
        album.add_links(["https://a", "https://b"]).set_introspected({"label": "XL"})
        ```
    """

    TYPE: ClassVar[str] = "musical_entity"

    _links: list[str] = field(factory=list, init=False)

    # Introspection
    _introspected: bool = field(default=False, init=False)
    _metadata: dict[str, str] = field(factory=dict, init=False)

    @abstractmethod
    def get_title(self) -> str:
        """Display title of the entity."""

    @abstractmethod
    def get_artist(self) -> str:
        """Main artist credited for the entity."""

    def get_type(self) -> str:
        return self.TYPE

    def get_safe_title(self) -> str:
        """Title without featuring clauses or version suffixes."""
        return clean_title(self.get_title())

    def to_dict(self) -> dict[str, Any]:
        """Generic representation; subclasses add their own fields."""
        return {"type": self.TYPE}

    # Links

    def add_link(self, link: str) -> Self:
        self._links.append(link)
        return self

    def add_links(self, links: Iterable[str]) -> Self:
        # A lone string is an iterable of characters, not of links
        if isinstance(links, str):
            raise TypeError("add_links expects an iterable of links, not a string")
        self._links.extend(links)
        return self

    def get_links(self) -> list[str]:
        """Copy of the links, in insertion order."""
        return list(self._links)

    def count_links(self) -> int:
        return len(self._links)

    # Introspection

    def is_introspected(self) -> bool:
        return self._introspected

    def set_introspected(self, metadata: Mapping[str, str] | None = None) -> Self:
        """Mark the entity as introspected.

        A given metadata mapping replaces the current one entirely; without
        it the current metadata is kept.
        """
        self._introspected = True
        if metadata is not None:
            self._metadata = dict(metadata)
        return self

    def get_metadata(self) -> dict[str, str]:
        return dict(self._metadata)

    def introspect(self) -> Self:
        """Introspect from the markers found in the title."""
        return self.set_introspected(extract_title_markers(self.get_title()))
