"""
Application Commands

Request objects and their handlers for the room lifecycle.
"""

from party_dj.application.commands.add_song import AddSongCommand, AddSongHandler
from party_dj.application.commands.close_room import CloseRoomCommand, CloseRoomHandler
from party_dj.application.commands.generate_room import GenerateRoomCommand, GenerateRoomHandler
from party_dj.application.commands.join_room import JoinRoomCommand, JoinRoomHandler
from party_dj.application.commands.remove_song import RemoveSongCommand, RemoveSongHandler

__all__ = [
    # Generate
    "GenerateRoomCommand",
    "GenerateRoomHandler",
    # Join
    "JoinRoomCommand",
    "JoinRoomHandler",
    # Close
    "CloseRoomCommand",
    "CloseRoomHandler",
    # Songs
    "AddSongCommand",
    "AddSongHandler",
    "RemoveSongCommand",
    "RemoveSongHandler",
]
