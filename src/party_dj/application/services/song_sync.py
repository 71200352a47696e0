"""Mirrors a playlist's current contents into its room record."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from party_dj.domain.shared.constants import RoomDocumentFields, UpstreamServices
from party_dj.domain.shared.exceptions import UpstreamFailureError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.rooms.entities import Track
    from ...domain.rooms.repository import RoomRepository
    from ..interfaces.playlist_service import PlaylistService

logger = logging.getLogger(__name__)


class SongSyncService:
    """Overwrites a room's ``songs`` with a fresh listing of its playlist.

    The playlist is the source of truth: every sync is a full replace, never
    an incremental patch. Concurrent syncs for the same room are
    last-writer-wins.
    """

    def __init__(self, *, room_repository: RoomRepository) -> None:
        self._room_repo = room_repository

    async def sync(
        self, room_code: str, playlist_id: str, playlists: PlaylistService
    ) -> list[Track]:
        """Fetch the playlist listing and store it on the room.

        Returns:
            The tracks written to the room, in playlist order.

        Raises:
            UpstreamFailureError: If the listing or the store write fails.
        """
        try:
            listed = await playlists.list_tracks(playlist_id)
        except Exception as exc:
            logger.exception(LogTemplates.PLAYLIST_LIST_FAILED, playlist_id)
            raise UpstreamFailureError(UpstreamServices.SPOTIFY) from exc

        tracks = [track.at_position(index) for index, track in enumerate(listed)]

        try:
            await self._room_repo.update(
                room_code,
                {RoomDocumentFields.SONGS: [track.to_document() for track in tracks]},
            )
        except Exception as exc:
            logger.exception(LogTemplates.SONGS_UPDATE_FAILED, room_code)
            raise UpstreamFailureError(UpstreamServices.ROOM_STORE) from exc

        logger.info(LogTemplates.SONGS_SYNCED, len(tracks), room_code)
        return tracks
