"""Spotify Web API adapter for room playlists."""

from party_dj.infrastructure.spotify.playlist_client import (
    PlaylistServiceError,
    SpotifyPlaylistClient,
)

__all__ = [
    "PlaylistServiceError",
    "SpotifyPlaylistClient",
]
