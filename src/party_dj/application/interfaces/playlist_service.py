"""Port interface for the streaming service that hosts room playlists."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...domain.rooms.entities import Track


class PlaylistService(ABC):
    """Interface for playlist operations, authenticated as a single user.

    Instances are short-lived: one is built per request from the caller's
    access token and closed when the request is done.
    """

    @abstractmethod
    async def create_playlist(self, user_id: str, name: str, *, public: bool = True) -> str:
        """Create a playlist owned by ``user_id`` and return its id."""
        ...

    @abstractmethod
    async def add_tracks(self, playlist_id: str, uris: list[str]) -> None:
        """Append tracks to the end of a playlist."""
        ...

    @abstractmethod
    async def remove_tracks(self, playlist_id: str, uris: list[str]) -> None:
        """Remove every occurrence of the given tracks from a playlist."""
        ...

    @abstractmethod
    async def list_tracks(self, playlist_id: str) -> list["Track"]:
        """List the tracks currently in a playlist, in playlist order."""
        ...

    @abstractmethod
    async def unfollow_playlist(self, playlist_id: str) -> None:
        """Detach a playlist from the authenticated user's library."""
        ...

    async def aclose(self) -> None:
        """Release any network resources held by this client."""
        return None

    async def __aenter__(self) -> PlaylistService:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()


PlaylistServiceFactory = Callable[[str], PlaylistService]
"""Builds a playlist client authenticated with the given access token."""
