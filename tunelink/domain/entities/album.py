"""Album entity."""

from typing import Any, ClassVar

from attrs import define, field, validators

from .base import MusicalEntity


@define(slots=True)
class AlbumEntity(MusicalEntity):
    """An album as found on one or more music services."""

    TYPE: ClassVar[str] = "album"

    title: str = field(validator=validators.instance_of(str))
    artist: str = field(validator=validators.instance_of(str))
    picture: str | None = field(
        default=None,
        validator=validators.optional(validators.instance_of(str)),
    )

    def get_title(self) -> str:
        return self.title

    def get_artist(self) -> str:
        return self.artist

    def to_dict(self) -> dict[str, Any]:
        return {
            **super().to_dict(),
            "title": self.title,
            "artist": self.artist,
            "picture": self.picture,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AlbumEntity":
        """Rebuild an album from its ``to_dict`` representation."""
        return cls(
            title=data["title"],
            artist=data["artist"],
            picture=data.get("picture"),
        )
