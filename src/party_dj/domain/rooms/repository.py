"""
Rooms Domain Repository Interfaces

Abstract base classes defining the contracts for room persistence.
Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Any

from party_dj.domain.rooms.entities import Room


class RoomRepository(ABC):
    """Abstract repository for room documents keyed by room code.

    A room is open exactly as long as its record exists. Implementations may
    use SQLite, a hosted document database, etc.
    """

    @abstractmethod
    async def get(self, room_code: str) -> Room | None:
        """Retrieve a room by code.

        Args:
            room_code: The room code.

        Returns:
            The room if found, None otherwise.
        """
        ...

    @abstractmethod
    async def set(self, room: Room) -> None:
        """Create a room record or replace an existing one entirely.

        Args:
            room: The room to store.
        """
        ...

    @abstractmethod
    async def update(self, room_code: str, fields: dict[str, Any]) -> None:
        """Replace selected top-level fields of an existing room document.

        Fields not named in ``fields`` are left untouched.

        Args:
            room_code: The room code.
            fields: Document keys (camelCase) mapped to their new values.

        Raises:
            EntityNotFoundError: If no room exists with this code.
        """
        ...

    @abstractmethod
    async def delete(self, room_code: str) -> bool:
        """Delete a room by code.

        Args:
            room_code: The room code.

        Returns:
            True if the room was deleted, False if it didn't exist.
        """
        ...

    @abstractmethod
    async def exists(self, room_code: str) -> bool:
        """Check if a room exists.

        Args:
            room_code: The room code.

        Returns:
            True if the room exists.
        """
        ...
