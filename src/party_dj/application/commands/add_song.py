"""Command and handler for adding a song to a room's playlist."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from party_dj.application.commands.song_mutation import SongCommand, SongMutationHandler
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..interfaces.playlist_service import PlaylistService


class AddSongCommand(SongCommand):
    """Request to append ``song_uri`` to the room's playlist."""


class AddSongHandler(SongMutationHandler):
    FAILURE_LOG: ClassVar[str] = LogTemplates.TRACK_ADD_FAILED

    async def _mutate(self, playlists: PlaylistService, playlist_id: str, uri: str) -> None:
        await playlists.add_tracks(playlist_id, [uri])
