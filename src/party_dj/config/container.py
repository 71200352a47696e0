"""Dependency Injection Container

Manages the application's dependency graph, providing lazy initialization
and lifecycle management for the room store, the Spotify client factory and
the room function handlers. Components are created on-demand and cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..application.commands.add_song import AddSongHandler
    from ..application.commands.close_room import CloseRoomHandler
    from ..application.commands.generate_room import GenerateRoomHandler
    from ..application.commands.join_room import JoinRoomHandler
    from ..application.commands.remove_song import RemoveSongHandler
    from ..application.functions import RoomFunctions
    from ..application.interfaces.playlist_service import PlaylistServiceFactory
    from ..application.services.song_sync import SongSyncService
    from ..domain.rooms.repository import RoomRepository
    from ..infrastructure.persistence.database import Database
    from .settings import Settings


@dataclass
class Container:
    """Dependency injection container.

    Components are lazily initialized when first accessed. Assigning the
    private slots before first access (for example a fake playlist factory)
    replaces the default implementation.
    """

    settings: Settings

    # Persistence layer
    _database: Database | None = None
    _room_repository: RoomRepository | None = None

    # Infrastructure adapters
    _playlist_service_factory: PlaylistServiceFactory | None = None

    # Application services
    _song_sync_service: SongSyncService | None = None

    # Command handlers
    _generate_room_handler: GenerateRoomHandler | None = None
    _join_room_handler: JoinRoomHandler | None = None
    _close_room_handler: CloseRoomHandler | None = None
    _add_song_handler: AddSongHandler | None = None
    _remove_song_handler: RemoveSongHandler | None = None

    _room_functions: RoomFunctions | None = None

    # === Database ===

    @property
    def database(self) -> Database:
        """Get the database connection manager."""
        if self._database is None:
            from ..infrastructure.persistence.database import Database

            self._database = Database(self.settings.database.url, settings=self.settings.database)
        return self._database

    # === Repositories ===

    @property
    def room_repository(self) -> RoomRepository:
        """Get the room document repository."""
        if self._room_repository is None:
            from ..infrastructure.persistence.repositories.room_repository import (
                SQLiteRoomRepository,
            )

            self._room_repository = SQLiteRoomRepository(self.database)
        return self._room_repository

    # === Infrastructure Adapters ===

    @property
    def playlist_service_factory(self) -> PlaylistServiceFactory:
        """Get the per-token Spotify client factory."""
        if self._playlist_service_factory is None:
            from ..infrastructure.spotify.playlist_client import SpotifyPlaylistClient

            self._playlist_service_factory = SpotifyPlaylistClient.factory(self.settings.spotify)
        return self._playlist_service_factory

    # === Application Services ===

    @property
    def song_sync_service(self) -> SongSyncService:
        if self._song_sync_service is None:
            from ..application.services.song_sync import SongSyncService

            self._song_sync_service = SongSyncService(room_repository=self.room_repository)
        return self._song_sync_service

    # === Command Handlers ===

    @property
    def generate_room_handler(self) -> GenerateRoomHandler:
        if self._generate_room_handler is None:
            from ..application.commands.generate_room import GenerateRoomHandler

            self._generate_room_handler = GenerateRoomHandler(
                room_repository=self.room_repository,
                playlist_service_factory=self.playlist_service_factory,
                settings=self.settings.rooms,
            )
        return self._generate_room_handler

    @property
    def join_room_handler(self) -> JoinRoomHandler:
        if self._join_room_handler is None:
            from ..application.commands.join_room import JoinRoomHandler

            self._join_room_handler = JoinRoomHandler(room_repository=self.room_repository)
        return self._join_room_handler

    @property
    def close_room_handler(self) -> CloseRoomHandler:
        if self._close_room_handler is None:
            from ..application.commands.close_room import CloseRoomHandler

            self._close_room_handler = CloseRoomHandler(
                room_repository=self.room_repository,
                playlist_service_factory=self.playlist_service_factory,
            )
        return self._close_room_handler

    @property
    def add_song_handler(self) -> AddSongHandler:
        if self._add_song_handler is None:
            from ..application.commands.add_song import AddSongHandler

            self._add_song_handler = AddSongHandler(
                playlist_service_factory=self.playlist_service_factory,
                song_sync_service=self.song_sync_service,
            )
        return self._add_song_handler

    @property
    def remove_song_handler(self) -> RemoveSongHandler:
        if self._remove_song_handler is None:
            from ..application.commands.remove_song import RemoveSongHandler

            self._remove_song_handler = RemoveSongHandler(
                playlist_service_factory=self.playlist_service_factory,
                song_sync_service=self.song_sync_service,
            )
        return self._remove_song_handler

    # === Callable functions ===

    @property
    def room_functions(self) -> RoomFunctions:
        """Get the name -> handler registry served over HTTP."""
        if self._room_functions is None:
            from ..application.functions import RoomFunctions

            self._room_functions = RoomFunctions.from_container(self)
        return self._room_functions

    # === Lifecycle ===

    async def initialize(self) -> None:
        """Initialize all async resources."""
        await self.database.initialize()

    async def shutdown(self) -> None:
        """Shutdown and cleanup all resources."""
        if self._database is not None:
            await self._database.close()


def create_container(settings: Settings) -> Container:
    """Create a new dependency injection container."""
    return Container(settings)
