"""Command and handler for removing a song from a room's playlist."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from party_dj.application.commands.song_mutation import SongCommand, SongMutationHandler
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..interfaces.playlist_service import PlaylistService


class RemoveSongCommand(SongCommand):
    """Request to remove every occurrence of ``song_uri`` from the room's playlist."""


class RemoveSongHandler(SongMutationHandler):
    FAILURE_LOG: ClassVar[str] = LogTemplates.TRACK_REMOVE_FAILED

    async def _mutate(self, playlists: PlaylistService, playlist_id: str, uri: str) -> None:
        await playlists.remove_tracks(playlist_id, [uri])
