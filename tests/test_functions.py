"""Tests for the name-based room function registry."""

from unittest.mock import AsyncMock

import pytest

from party_dj.application.commands.join_room import JoinRoomCommand
from party_dj.application.functions import RoomFunction, RoomFunctions
from party_dj.application.results import JoinRoomResult


@pytest.fixture
def join_handle():
    return AsyncMock(return_value=JoinRoomResult.success(is_room_open=False))


@pytest.fixture
def functions(join_handle):
    return RoomFunctions([RoomFunction("joinRoom", JoinRoomCommand, join_handle)])


class TestRoomFunctions:
    """Tests for RoomFunctions dispatch."""

    def test_names_and_membership(self, functions):
        assert functions.names == ["joinRoom"]
        assert "joinRoom" in functions
        assert "nope" not in functions

    @pytest.mark.asyncio
    async def test_call_builds_command_and_returns_envelope(self, functions, join_handle):
        envelope = await functions.call("joinRoom", {"roomCode": "abc123"})

        assert envelope == {"status": "success", "isRoomOpen": False}
        command = join_handle.await_args.args[0]
        assert isinstance(command, JoinRoomCommand)
        assert command.room_code == "abc123"

    @pytest.mark.asyncio
    async def test_invalid_payload_short_circuits(self, functions, join_handle):
        envelope = await functions.call("joinRoom", {"roomCode": None})

        assert envelope == {"status": "error", "code": 400, "message": "Room code format incorrect"}
        join_handle.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_function(self, functions):
        with pytest.raises(KeyError):
            await functions.call("deleteEverything", {})


class TestFromContainer:
    """End-to-end dispatch through container-built handlers."""

    @pytest.mark.asyncio
    async def test_generate_then_join(self, container_with_fakes):
        await container_with_fakes.initialize()
        try:
            functions = container_with_fakes.room_functions
            assert set(functions.names) == {
                "generateRoom",
                "joinRoom",
                "closeRoom",
                "addSong",
                "removeSong",
            }

            created = await functions.call(
                "generateRoom", {"username": "alice", "accessToken": "tok"}
            )
            joined = await functions.call("joinRoom", {"roomCode": created["roomCode"]})
        finally:
            await container_with_fakes.shutdown()

        assert created["status"] == "success"
        assert joined == {"status": "success", "isRoomOpen": True, "playlistId": "P1"}
