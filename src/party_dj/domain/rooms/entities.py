"""Core domain entities for the rooms bounded context."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from party_dj.domain.shared.types import NonNegativeInt, RoomCodeStr


class Track(BaseModel):
    """Immutable value object representing one song in a room's playlist."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    name: str = ""
    artist: str = ""
    image_url: str = ""
    uri: str = ""

    # Spotify user id of the contributor, when the playlist reports one
    added_by: str | None = None
    position: NonNegativeInt | None = None

    @classmethod
    def empty(cls) -> Track:
        """Placeholder track with every display field blank."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.uri

    def at_position(self, position: int) -> Track:
        """Return a copy of this track placed at ``position`` in the playlist."""
        return self.model_copy(update={"position": position})

    def to_document(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class Room(BaseModel):
    """Aggregate root for a shared listening room.

    ``enabled`` and ``current_song`` are part of the stored document but are
    only written when the room is opened; nothing reads or updates them.
    """

    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)

    room_code: RoomCodeStr
    owner: str
    playlist_id: str
    enabled: bool = True
    songs: list[Track] = Field(default_factory=list)
    current_song: Track = Field(default_factory=Track.empty)

    @classmethod
    def open(cls, room_code: str, owner: str, playlist_id: str) -> Room:
        """Create a freshly opened room with no songs."""
        return cls(
            room_code=room_code,
            owner=owner,
            playlist_id=playlist_id,
            enabled=True,
            songs=[],
            current_song=Track.empty(),
        )

    def to_document(self) -> dict[str, Any]:
        """Serialize to the stored document shape (the room code is the key, not a field)."""
        return self.model_dump(by_alias=True, exclude={"room_code"}, exclude_none=True)

    @classmethod
    def from_document(cls, room_code: str, document: dict[str, Any]) -> Room:
        return cls.model_validate({**document, "roomCode": room_code})
