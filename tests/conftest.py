import json
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

# ============================================================================
# Database Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def in_memory_database():
    """Create an in-memory SQLite database for testing."""
    from party_dj.infrastructure.persistence.database import Database

    db = Database(":memory:")
    await db.initialize()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def room_repository(in_memory_database):
    """Create a room repository with in-memory database."""
    from party_dj.infrastructure.persistence.repositories.room_repository import (
        SQLiteRoomRepository,
    )

    return SQLiteRoomRepository(in_memory_database)


@pytest.fixture
def stored_document(in_memory_database):
    """Read a room's raw stored document, as clients would see it."""

    async def read(room_code: str):
        row = await in_memory_database.fetch_one(
            "SELECT document FROM rooms WHERE room_code = ?", (room_code,)
        )
        return json.loads(row["document"]) if row else None

    return read


@pytest.fixture
def stored_room_count(in_memory_database):
    """Count the rooms currently stored."""

    async def count() -> int:
        row = await in_memory_database.fetch_one("SELECT COUNT(*) AS total FROM rooms")
        return int(row["total"])

    return count


# ============================================================================
# Domain Entity Fixtures
# ============================================================================


@pytest.fixture
def sample_tracks():
    """Two tracks as a playlist listing would return them."""
    from party_dj.domain.rooms.entities import Track

    return [
        Track(
            name="Song A",
            artist="Artist A",
            image_url="https://i.scdn.co/image/a",
            uri="spotify:track:A",
            added_by="alice",
        ),
        Track(
            name="Song B",
            artist="Artist B",
            image_url="https://i.scdn.co/image/b",
            uri="spotify:track:B",
        ),
    ]


@pytest.fixture
def open_room():
    """A freshly opened room."""
    from party_dj.domain.rooms.entities import Room

    return Room.open("abc123", "alice", "P1")


# ============================================================================
# Adapter Fixtures
# ============================================================================


@pytest.fixture
def playlist_service():
    """Mock playlist service usable as an async context manager."""
    from party_dj.application.interfaces.playlist_service import PlaylistService

    service = AsyncMock(spec=PlaylistService)
    service.__aenter__.return_value = service
    service.__aexit__.return_value = False
    service.create_playlist.return_value = "P1"
    service.list_tracks.return_value = []
    return service


@pytest.fixture
def playlist_factory(playlist_service):
    """Token -> playlist service factory that records the tokens it was given."""
    tokens: list[str] = []

    def factory(access_token: str):
        tokens.append(access_token)
        return playlist_service

    factory.tokens = tokens
    return factory


@pytest.fixture
def mock_room_repository():
    """Mock room repository for handler tests that don't need a database."""
    from party_dj.domain.rooms.repository import RoomRepository

    repo = AsyncMock(spec=RoomRepository)
    repo.get.return_value = None
    repo.exists.return_value = False
    repo.delete.return_value = True
    return repo


# ============================================================================
# Container Fixtures
# ============================================================================


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory database."""
    from party_dj.config.settings import Settings

    return Settings(environment="test", database={"url": "sqlite:///:memory:"})


@pytest.fixture
def container_with_fakes(test_settings, playlist_factory):
    """Container with a real in-memory store and a mocked playlist service."""
    from party_dj.config.container import Container

    return Container(settings=test_settings, _playlist_service_factory=playlist_factory)
