"""SQLite repository implementations."""

from party_dj.infrastructure.persistence.repositories.room_repository import SQLiteRoomRepository

__all__ = ["SQLiteRoomRepository"]
