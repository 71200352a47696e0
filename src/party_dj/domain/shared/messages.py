"""Centralized message constants for error messages, validation, and log output."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions, envelopes and validation failures."""

    # Request parameter validation (templates)
    PARAMETER_FORMAT_INCORRECT = "{label} format incorrect"

    # Downstream failures returned in error envelopes
    ROOM_CODE_ALLOCATION_FAILED = "Room code allocation failed"
    UPSTREAM_FAILED = "{service} connection failed"

    # Room code generation
    NEGATIVE_CODE_LENGTH = "Room code length cannot be negative"

    # Settings validation
    INVALID_DATABASE_URL = "Database URL must start with sqlite://"
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"

    # Spotify responses
    PLAYLIST_ID_MISSING = "Spotify did not return a playlist id"
    SPOTIFY_HTTP_ERROR = "Spotify API returned HTTP {status_code} for {method} {path}"
    SPOTIFY_TRANSPORT_ERROR = "Spotify API request failed for {method} {path}: {error}"

    # HTTP surface
    REQUEST_BODY_NOT_OBJECT = "Request body must be a JSON object"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting.
    """

    # Application lifecycle
    APP_STARTING = "Starting PartyDJ room functions (environment=%s)"
    APP_LISTENING = "Serving room functions on %s:%d"
    APP_STOPPED = "Room functions stopped"
    APP_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    APP_FATAL_ERROR = "Fatal error running room functions: %s"

    # Database lifecycle
    DATABASE_INITIALIZED = "Database initialized at %s"
    DATABASE_CLOSED = "Database manager closed"

    # Room store
    ROOM_SAVED = "Saved room %s"
    ROOM_UPDATED = "Updated room %s fields %s"
    ROOM_DELETED = "Deleted room %s"

    # Handlers
    PARAMETER_INVALID = "%s is null or ''"
    ROOM_CODE_COLLISION = "Room code %s already in use (attempt %d/%d)"
    PLAYLIST_CREATE_FAILED = "Creating playlist for room %s failed"
    ROOM_CREATE_FAILED = "Writing room %s failed; playlist %s left in place"
    ROOM_CREATED = "Created room %s for %s with playlist %s"
    ROOM_LOOKUP_FAILED = "Looking up room %s failed"
    ROOM_DELETE_FAILED = "Deleting room %s failed"
    PLAYLIST_UNFOLLOW_FAILED = "Unfollowing playlist %s for closed room %s failed"
    ROOM_CLOSED = "Closed room %s"
    TRACK_ADD_FAILED = "Adding %s to playlist %s failed"
    TRACK_REMOVE_FAILED = "Removing %s from playlist %s failed"
    PLAYLIST_LIST_FAILED = "Listing tracks of playlist %s failed"
    SONGS_UPDATE_FAILED = "Writing songs for room %s failed"
    SONGS_SYNCED = "Synced %d songs into room %s"

    PLAYLIST_CLIENT_OPEN_FAILED = "Building playlist client failed"
    PLAYLIST_CLIENT_CLOSE_FAILED = "Closing playlist client failed"

    # Spotify client
    SPOTIFY_REQUEST = "Spotify %s %s"
    SPOTIFY_ITEM_SKIPPED = "Skipping playlist item without track payload at index %d"

    # HTTP surface
    FUNCTION_CALLED = "Callable function %s invoked"
