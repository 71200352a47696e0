"""Command and handler for opening a new room backed by a fresh playlist."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, ClassVar

from party_dj.application.commands.base import RoomCommand
from party_dj.application.results import GenerateRoomResult
from party_dj.application.services.playlist_session import playlist_session
from party_dj.config.settings import RoomSettings
from party_dj.domain.rooms.code_generator import generate_code
from party_dj.domain.rooms.entities import Room
from party_dj.domain.shared.constants import UpstreamServices
from party_dj.domain.shared.exceptions import InvalidParameterError, UpstreamFailureError
from party_dj.domain.shared.messages import ErrorMessages, LogTemplates

if TYPE_CHECKING:
    from ...domain.rooms.repository import RoomRepository
    from ..interfaces.playlist_service import PlaylistService, PlaylistServiceFactory

logger = logging.getLogger(__name__)


class GenerateRoomCommand(RoomCommand):
    """Request to create a playlist for ``username`` and open a room around it."""

    REQUIRED_PARAMS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("username", "Username"),
        ("access_token", "Access token"),
    )

    username: str | None = None
    access_token: str | None = None


class GenerateRoomHandler:
    """Creates the playlist first, then the room record.

    If the record cannot be written the playlist is left behind; there is no
    rollback.
    """

    def __init__(
        self,
        *,
        room_repository: RoomRepository,
        playlist_service_factory: PlaylistServiceFactory,
        settings: RoomSettings | None = None,
        code_generator: Callable[[int], str] = generate_code,
    ) -> None:
        self._room_repo = room_repository
        self._playlist_factory = playlist_service_factory
        self._settings = settings or RoomSettings()
        self._generate_code = code_generator

    async def handle(self, command: GenerateRoomCommand) -> GenerateRoomResult:
        try:
            command.check_params()
        except InvalidParameterError as exc:
            logger.error(LogTemplates.PARAMETER_INVALID, exc.label)
            return GenerateRoomResult.invalid_parameter(exc)

        try:
            room_code = await self._allocate_code()
            async with playlist_session(self._playlist_factory, command.access_token) as playlists:
                playlist_id = await self._create_playlist(playlists, command.username, room_code)
            await self._open_room(room_code, command.username, playlist_id)
        except UpstreamFailureError as exc:
            return GenerateRoomResult.upstream_failure(exc)

        logger.info(LogTemplates.ROOM_CREATED, room_code, command.username, playlist_id)
        return GenerateRoomResult.success(room_code=room_code, playlist_id=playlist_id)

    def playlist_name(self, room_code: str) -> str:
        return f"{self._settings.app_name}:{room_code}"

    async def _allocate_code(self) -> str:
        if not self._settings.ensure_unique_codes:
            return self._generate_code(self._settings.code_length)

        attempts = self._settings.max_code_attempts
        for attempt in range(1, attempts + 1):
            room_code = self._generate_code(self._settings.code_length)
            try:
                taken = await self._room_repo.exists(room_code)
            except Exception as exc:
                logger.exception(LogTemplates.ROOM_LOOKUP_FAILED, room_code)
                raise UpstreamFailureError(UpstreamServices.ROOM_STORE) from exc
            if not taken:
                return room_code
            logger.warning(LogTemplates.ROOM_CODE_COLLISION, room_code, attempt, attempts)

        raise UpstreamFailureError(
            UpstreamServices.ROOM_STORE, ErrorMessages.ROOM_CODE_ALLOCATION_FAILED
        )

    async def _create_playlist(
        self, playlists: PlaylistService, username: str, room_code: str
    ) -> str:
        try:
            return await playlists.create_playlist(
                username,
                self.playlist_name(room_code),
                public=self._settings.public_playlists,
            )
        except Exception as exc:
            logger.exception(LogTemplates.PLAYLIST_CREATE_FAILED, room_code)
            raise UpstreamFailureError(UpstreamServices.SPOTIFY) from exc

    async def _open_room(self, room_code: str, owner: str, playlist_id: str) -> None:
        try:
            await self._room_repo.set(Room.open(room_code, owner, playlist_id))
        except Exception as exc:
            logger.exception(LogTemplates.ROOM_CREATE_FAILED, room_code, playlist_id)
            raise UpstreamFailureError(UpstreamServices.ROOM_STORE) from exc
