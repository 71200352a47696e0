"""Command and handler for checking whether a room can be joined."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from party_dj.application.commands.base import RoomCommand
from party_dj.application.results import JoinRoomResult
from party_dj.domain.shared.constants import UpstreamServices
from party_dj.domain.shared.exceptions import InvalidParameterError, UpstreamFailureError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ...domain.rooms.repository import RoomRepository

logger = logging.getLogger(__name__)


class JoinRoomCommand(RoomCommand):
    REQUIRED_PARAMS: ClassVar[tuple[tuple[str, str], ...]] = (("room_code", "Room code"),)

    room_code: str | None = None


class JoinRoomHandler:
    """Looks a room up by code.

    An unknown code is a normal outcome (``isRoomOpen: false``), not an error.
    """

    def __init__(self, *, room_repository: RoomRepository) -> None:
        self._room_repo = room_repository

    async def handle(self, command: JoinRoomCommand) -> JoinRoomResult:
        try:
            command.check_params()
        except InvalidParameterError as exc:
            logger.error(LogTemplates.PARAMETER_INVALID, exc.label)
            return JoinRoomResult.invalid_parameter(exc)

        try:
            room = await self._room_repo.get(command.room_code)
        except Exception:
            logger.exception(LogTemplates.ROOM_LOOKUP_FAILED, command.room_code)
            return JoinRoomResult.upstream_failure(
                UpstreamFailureError(UpstreamServices.ROOM_STORE)
            )

        if room is None:
            return JoinRoomResult.success(is_room_open=False)
        return JoinRoomResult.success(is_room_open=True, playlist_id=room.playlist_id)
