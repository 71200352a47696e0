"""Command and handler for closing a room."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from party_dj.application.commands.base import RoomCommand
from party_dj.application.results import HandlerResult
from party_dj.application.services.playlist_session import playlist_session
from party_dj.domain.shared.constants import UpstreamServices
from party_dj.domain.shared.exceptions import InvalidParameterError, UpstreamFailureError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.rooms.repository import RoomRepository
    from ..interfaces.playlist_service import PlaylistServiceFactory

logger = logging.getLogger(__name__)


class CloseRoomCommand(RoomCommand):
    REQUIRED_PARAMS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("room_code", "Room code"),
        ("access_token", "Access token"),
        ("playlist_id", "Playlist id"),
    )

    room_code: str | None = None
    access_token: str | None = None
    playlist_id: str | None = None


class CloseRoomHandler:
    """Deletes the room record, then unfollows its playlist.

    The record goes first so the room stops being joinable right away. If the
    unfollow then fails the caller still gets an error, even though the room
    is already gone.
    """

    def __init__(
        self,
        *,
        room_repository: RoomRepository,
        playlist_service_factory: PlaylistServiceFactory,
    ) -> None:
        self._room_repo = room_repository
        self._playlist_factory = playlist_service_factory

    async def handle(self, command: CloseRoomCommand) -> HandlerResult:
        try:
            command.check_params()
        except InvalidParameterError as exc:
            logger.error(LogTemplates.PARAMETER_INVALID, exc.label)
            return HandlerResult.invalid_parameter(exc)

        try:
            await self._delete_room(command.room_code)
            await self._unfollow_playlist(
                command.access_token, command.playlist_id, command.room_code
            )
        except UpstreamFailureError as exc:
            return HandlerResult.upstream_failure(exc)

        logger.info(LogTemplates.ROOM_CLOSED, command.room_code)
        return HandlerResult.success()

    async def _delete_room(self, room_code: str) -> None:
        try:
            await self._room_repo.delete(room_code)
        except Exception as exc:
            logger.exception(LogTemplates.ROOM_DELETE_FAILED, room_code)
            raise UpstreamFailureError(UpstreamServices.ROOM_STORE) from exc

    async def _unfollow_playlist(self, access_token: str, playlist_id: str, room_code: str) -> None:
        async with playlist_session(self._playlist_factory, access_token) as playlists:
            try:
                await playlists.unfollow_playlist(playlist_id)
            except Exception as exc:
                logger.exception(LogTemplates.PLAYLIST_UNFOLLOW_FAILED, playlist_id, room_code)
                raise UpstreamFailureError(UpstreamServices.SPOTIFY) from exc
