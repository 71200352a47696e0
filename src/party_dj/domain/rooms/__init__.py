"""
Rooms Bounded Context

Room and track entities, room code generation, and the room repository port.
"""

from party_dj.domain.rooms.code_generator import (
    DEFAULT_ROOM_CODE_LENGTH,
    ROOM_CODE_ALPHABET,
    generate_code,
)
from party_dj.domain.rooms.entities import Room, Track
from party_dj.domain.rooms.repository import RoomRepository

__all__ = [
    "DEFAULT_ROOM_CODE_LENGTH",
    "ROOM_CODE_ALPHABET",
    "generate_code",
    "Room",
    "Track",
    "RoomRepository",
]
