"""Track entity.

A track always belongs to an album and is credited to the album's artist.
"""

from typing import Any, ClassVar

from attrs import define, field, validators

from .album import AlbumEntity
from .base import MusicalEntity


@define(slots=True)
class TrackEntity(MusicalEntity):
    """A single recording, linked across music services."""

    TYPE: ClassVar[str] = "track"

    title: str = field(validator=validators.instance_of(str))
    album: AlbumEntity = field(validator=validators.instance_of(AlbumEntity))

    def get_title(self) -> str:
        return self.title

    def get_artist(self) -> str:
        return self.album.artist

    def get_album(self) -> AlbumEntity:
        return self.album

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "title": self.title,
            "artist": self.get_artist(),
            "album": self.album.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TrackEntity":
        """Rebuild a track, and its album, from its ``to_dict`` representation."""
        return cls(
            title=data["title"],
            album=AlbumEntity.from_dict(data["album"]),
        )
