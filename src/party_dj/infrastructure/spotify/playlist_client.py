"""Spotify Web API implementation of the playlist service."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from party_dj.application.interfaces.playlist_service import (
    PlaylistService,
    PlaylistServiceFactory,
)
from party_dj.config.settings import SpotifySettings
from party_dj.domain.rooms.entities import Track
from party_dj.domain.shared.constants import SpotifyEndpoints
from party_dj.domain.shared.messages import ErrorMessages, LogTemplates
from party_dj.infrastructure.spotify.models import SpotifyPlaylist, SpotifyPlaylistTracksPage

logger = logging.getLogger(__name__)


class PlaylistServiceError(Exception):
    """Raised when a Spotify request fails or returns an unusable response."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SpotifyPlaylistClient(PlaylistService):
    """Playlist operations for one user, authenticated with their access token.

    Each instance owns its own ``httpx.AsyncClient``; close it with
    ``aclose()`` or by using the client as an async context manager.
    """

    def __init__(
        self,
        access_token: str,
        settings: SpotifySettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or SpotifySettings()
        self._client = httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            headers={"Authorization": f"Bearer {access_token}"},
            timeout=self._settings.timeout_s,
            transport=transport,
        )

    @classmethod
    def factory(
        cls,
        settings: SpotifySettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> PlaylistServiceFactory:
        """Return a callable that builds a fresh client per access token."""

        def build(access_token: str) -> PlaylistService:
            return cls(access_token, settings, transport=transport)

        return build

    async def _request(
        self, method: str, path: str, *, json: dict[str, Any] | None = None
    ) -> httpx.Response:
        logger.debug(LogTemplates.SPOTIFY_REQUEST, method, path)
        try:
            response = await self._client.request(method, path, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise PlaylistServiceError(
                ErrorMessages.SPOTIFY_HTTP_ERROR.format(
                    status_code=status_code, method=method, path=path
                ),
                status_code=status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise PlaylistServiceError(
                ErrorMessages.SPOTIFY_TRANSPORT_ERROR.format(method=method, path=path, error=exc)
            ) from exc
        return response

    async def create_playlist(self, user_id: str, name: str, *, public: bool = True) -> str:
        path = SpotifyEndpoints.USER_PLAYLISTS.format(user_id=quote(user_id, safe=""))
        response = await self._request("POST", path, json={"name": name, "public": public})
        try:
            playlist = SpotifyPlaylist.model_validate(response.json())
        except (ValidationError, ValueError) as exc:
            raise PlaylistServiceError(ErrorMessages.PLAYLIST_ID_MISSING) from exc
        return playlist.id

    async def add_tracks(self, playlist_id: str, uris: list[str]) -> None:
        path = SpotifyEndpoints.PLAYLIST_TRACKS.format(playlist_id=quote(playlist_id, safe=""))
        await self._request("POST", path, json={"uris": uris})

    async def remove_tracks(self, playlist_id: str, uris: list[str]) -> None:
        path = SpotifyEndpoints.PLAYLIST_TRACKS.format(playlist_id=quote(playlist_id, safe=""))
        await self._request("DELETE", path, json={"tracks": [{"uri": uri} for uri in uris]})

    async def list_tracks(self, playlist_id: str) -> list[Track]:
        # First page only; Spotify returns up to 100 items per page.
        path = SpotifyEndpoints.PLAYLIST_TRACKS.format(playlist_id=quote(playlist_id, safe=""))
        response = await self._request("GET", path)
        page = SpotifyPlaylistTracksPage.model_validate(response.json())

        tracks: list[Track] = []
        for index, item in enumerate(page.items):
            track = item.to_domain()
            if track is None:
                logger.debug(LogTemplates.SPOTIFY_ITEM_SKIPPED, index)
                continue
            tracks.append(track)
        return tracks

    async def unfollow_playlist(self, playlist_id: str) -> None:
        path = SpotifyEndpoints.PLAYLIST_FOLLOWERS.format(playlist_id=quote(playlist_id, safe=""))
        await self._request("DELETE", path)

    async def aclose(self) -> None:
        await self._client.aclose()
