"""Tunelink domain layer - pure business logic with zero external dependencies."""

# Export all domain components
from . import entities

# Re-export key types for convenience
from .entities import (
    AlbumEntity,
    MusicalEntity,
    TrackEntity,
    clean_title,
    extract_title_markers,
)
from .interfaces import MusicalEntityInterface

__all__ = [
    # Modules
    "entities",
    # Key domain types
    "MusicalEntity",
    "AlbumEntity",
    "TrackEntity",
    "MusicalEntityInterface",
    # Title helpers
    "clean_title",
    "extract_title_markers",
]
