"""Core domain entities representing music concepts."""

from .album import AlbumEntity
from .base import MusicalEntity

# Shared utilities
from .shared import VERSION_MARKERS, clean_title, extract_title_markers
from .track import TrackEntity

__all__ = [
    # Entities
    "MusicalEntity",
    "AlbumEntity",
    "TrackEntity",
    # Shared utilities
    "VERSION_MARKERS",
    "clean_title",
    "extract_title_markers",
]
