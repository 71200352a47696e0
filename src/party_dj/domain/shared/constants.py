"""Centralized constants for storage schema, document fields and other shared values.

This module provides reusable constants that reduce magic strings and improve maintainability.
"""

from __future__ import annotations


class DatabaseTables:
    """Database table names."""

    ROOMS = "rooms"


class RoomDocumentFields:
    """Top-level room document keys written through partial updates."""

    SONGS = "songs"


class SQLPragmas:
    """SQLite PRAGMA statements for database configuration.

    These pragmas are applied to each connection to ensure consistent behavior.
    """

    JOURNAL_MODE_WAL = "PRAGMA journal_mode=WAL"
    BUSY_TIMEOUT = "PRAGMA busy_timeout={timeout}"


class SpotifyEndpoints:
    """Spotify Web API paths, relative to the configured base URL."""

    USER_PLAYLISTS = "/users/{user_id}/playlists"
    PLAYLIST_TRACKS = "/playlists/{playlist_id}/tracks"
    PLAYLIST_FOLLOWERS = "/playlists/{playlist_id}/followers"


class UpstreamServices:
    """Names of downstream systems, used in error envelopes and logs."""

    SPOTIFY = "Spotify"
    ROOM_STORE = "Room store"
