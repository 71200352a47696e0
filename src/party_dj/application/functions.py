"""Name-based dispatch of raw request payloads to room handlers.

Each handler is published under the callable-function name clients use
(``generateRoom``, ``joinRoom`` ...). The payload is the ``data`` object of a
callable request; the return value is the response envelope.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from party_dj.application.commands.add_song import AddSongCommand
from party_dj.application.commands.base import RoomCommand
from party_dj.application.commands.close_room import CloseRoomCommand
from party_dj.application.commands.generate_room import GenerateRoomCommand
from party_dj.application.commands.join_room import JoinRoomCommand
from party_dj.application.commands.remove_song import RemoveSongCommand
from party_dj.application.results import HandlerResult
from party_dj.domain.shared.exceptions import InvalidParameterError
from party_dj.domain.shared.messages import LogTemplates

if TYPE_CHECKING:
    from ..config.container import Container

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomFunction:
    """A published handler: the request model plus the coroutine that serves it."""

    name: str
    command_type: type[RoomCommand]
    handle: Callable[[Any], Awaitable[HandlerResult]]


class RoomFunctions:
    """Registry of callable room functions."""

    def __init__(self, functions: list[RoomFunction]) -> None:
        self._functions = {function.name: function for function in functions}

    @classmethod
    def from_container(cls, container: Container) -> RoomFunctions:
        return cls(
            [
                RoomFunction(
                    "generateRoom", GenerateRoomCommand, container.generate_room_handler.handle
                ),
                RoomFunction("joinRoom", JoinRoomCommand, container.join_room_handler.handle),
                RoomFunction("closeRoom", CloseRoomCommand, container.close_room_handler.handle),
                RoomFunction("addSong", AddSongCommand, container.add_song_handler.handle),
                RoomFunction("removeSong", RemoveSongCommand, container.remove_song_handler.handle),
            ]
        )

    @property
    def names(self) -> list[str]:
        return list(self._functions)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    async def call(self, name: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Run the named function on a raw payload and return its envelope.

        Raises:
            KeyError: If no function is published under ``name``.
        """
        function = self._functions[name]
        logger.debug(LogTemplates.FUNCTION_CALLED, name)

        try:
            command = function.command_type.from_payload(payload)
        except InvalidParameterError as exc:
            logger.error(LogTemplates.PARAMETER_INVALID, exc.label)
            return HandlerResult.invalid_parameter(exc).to_envelope()

        result = await function.handle(command)
        return result.to_envelope()
