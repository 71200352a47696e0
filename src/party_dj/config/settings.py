"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.rooms.code_generator import DEFAULT_ROOM_CODE_LENGTH
from ..domain.shared.messages import ErrorMessages
from ..domain.shared.types import (
    BusyTimeoutMs,
    CodeAttempts,
    ConnectionTimeoutS,
    HttpTimeoutS,
    HttpUrlStr,
    NonEmptyStr,
    PortInt,
    RoomCodeLength,
)
from ..domain.shared.validators import validate_sqlite_url


class DatabaseSettings(BaseModel):
    """Room store configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    url: str = Field(
        default="sqlite:///data/rooms.db",
        validation_alias=AliasChoices("url", "database_url", "db_url"),
    )
    busy_timeout_ms: BusyTimeoutMs = Field(
        default=5000,
        validation_alias=AliasChoices("busy_timeout_ms", "busy_timeout"),
    )
    connection_timeout_s: ConnectionTimeoutS = Field(
        default=10,
        validation_alias=AliasChoices("connection_timeout_s", "connection_timeout"),
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate database URL format."""
        return validate_sqlite_url(v)


class SpotifySettings(BaseModel):
    """Spotify Web API configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    api_base_url: HttpUrlStr = Field(
        default="https://api.spotify.com/v1",
        validation_alias=AliasChoices("api_base_url", "base_url"),
    )
    timeout_s: HttpTimeoutS = Field(
        default=10.0, validation_alias=AliasChoices("timeout_s", "timeout")
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class RoomSettings(BaseModel):
    """Room lifecycle configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    # Prefix of every room playlist name: "<app_name>:<room code>"
    app_name: NonEmptyStr = "PartyDJ"
    code_length: RoomCodeLength = DEFAULT_ROOM_CODE_LENGTH
    public_playlists: bool = True

    # Off by default: codes are assumed unique without a store lookup
    ensure_unique_codes: bool = False
    max_code_attempts: CodeAttempts = 5


class ServerSettings(BaseModel):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(frozen=True)

    host: str = "0.0.0.0"
    port: PortInt = 8080


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - DATABASE__URL, DATABASE__BUSY_TIMEOUT_MS, ... (nested with delimiter)
    - SPOTIFY__API_BASE_URL, SPOTIFY__TIMEOUT_S
    - ROOMS__APP_NAME, ROOMS__CODE_LENGTH, ROOMS__ENSURE_UNIQUE_CODES, ...
    - SERVER__HOST, SERVER__PORT
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    log_level: str = "INFO"

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    spotify: SpotifySettings = Field(default_factory=SpotifySettings)
    rooms: RoomSettings = Field(default_factory=RoomSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
