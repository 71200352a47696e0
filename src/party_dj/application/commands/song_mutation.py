"""Shared flow for commands that change a room's playlist and then resync it."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from party_dj.application.commands.base import RoomCommand
from party_dj.application.results import HandlerResult
from party_dj.application.services.playlist_session import playlist_session
from party_dj.domain.shared.constants import UpstreamServices
from party_dj.domain.shared.exceptions import InvalidParameterError, UpstreamFailureError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..interfaces.playlist_service import PlaylistService, PlaylistServiceFactory
    from ..services.song_sync import SongSyncService

logger = logging.getLogger(__name__)


class SongCommand(RoomCommand):
    """Request naming one track of one room's playlist."""

    REQUIRED_PARAMS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("room_code", "Room code"),
        ("access_token", "Access token"),
        ("playlist_id", "Playlist id"),
        ("song_uri", "Song uri"),
    )

    room_code: str | None = None
    access_token: str | None = None
    playlist_id: str | None = None
    song_uri: str | None = None


class SongMutationHandler(ABC):
    """Applies one playlist change, then mirrors the playlist into the room.

    A failed change is reported without attempting the resync.
    """

    FAILURE_LOG: ClassVar[str]

    def __init__(
        self,
        *,
        playlist_service_factory: PlaylistServiceFactory,
        song_sync_service: SongSyncService,
    ) -> None:
        self._playlist_factory = playlist_service_factory
        self._song_sync = song_sync_service

    @abstractmethod
    async def _mutate(self, playlists: PlaylistService, playlist_id: str, uri: str) -> None:
        ...

    async def handle(self, command: SongCommand) -> HandlerResult:
        try:
            command.check_params()
        except InvalidParameterError as exc:
            logger.error(LogTemplates.PARAMETER_INVALID, exc.label)
            return HandlerResult.invalid_parameter(exc)

        try:
            async with playlist_session(self._playlist_factory, command.access_token) as playlists:
                await self._apply(playlists, command)
                await self._song_sync.sync(command.room_code, command.playlist_id, playlists)
        except UpstreamFailureError as exc:
            return HandlerResult.upstream_failure(exc)

        return HandlerResult.success()

    async def _apply(self, playlists: PlaylistService, command: SongCommand) -> None:
        try:
            await self._mutate(playlists, command.playlist_id, command.song_uri)
        except Exception as exc:
            logger.exception(self.FAILURE_LOG, command.song_uri, command.playlist_id)
            raise UpstreamFailureError(UpstreamServices.SPOTIFY) from exc
