"""Domain layer test fixtures - Pure business objects with no dependencies.

Function-scoped so every test gets fresh, mutable entities.
"""

import pytest

from tunelink.domain.entities import AlbumEntity, TrackEntity


@pytest.fixture
def album():
    """Standard test album."""
    return AlbumEntity(
        title="OK Computer",
        artist="Radiohead",
        picture="https://img.example.com/ok-computer.jpg",
    )


@pytest.fixture
def track(album):
    """Standard test track on the test album."""
    return TrackEntity(title="Paranoid Android", album=album)


@pytest.fixture
def links():
    """Links for the same track on several services."""
    return [
        "https://open.spotify.com/track/6LgJvl0Xdtc73RJ1mmpotq",
        "https://www.deezer.com/track/3135556",
        "https://music.apple.com/album/paranoid-android/1097861387?i=1097861395",
    ]
