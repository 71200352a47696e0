"""Pydantic models for the parts of Spotify Web API responses we read."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from party_dj.domain.rooms.entities import Track


class _SpotifyModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class SpotifyImage(_SpotifyModel):
    url: str


class SpotifyArtist(_SpotifyModel):
    name: str = ""


class SpotifyAlbum(_SpotifyModel):
    images: list[SpotifyImage] = Field(default_factory=list)


class SpotifyUser(_SpotifyModel):
    id: str | None = None


class SpotifyTrack(_SpotifyModel):
    name: str = ""
    uri: str = ""
    artists: list[SpotifyArtist] = Field(default_factory=list)
    album: SpotifyAlbum | None = None


class SpotifyPlaylistItem(_SpotifyModel):
    """One entry of ``GET /playlists/{id}/tracks``.

    ``track`` is null for entries Spotify can no longer resolve, and
    ``added_by`` is null on playlists created before contributor tracking.
    """

    track: SpotifyTrack | None = None
    added_by: SpotifyUser | None = None

    def to_domain(self) -> Track | None:
        if self.track is None:
            return None

        artist = self.track.artists[0].name if self.track.artists else ""
        images = self.track.album.images if self.track.album else []
        return Track(
            name=self.track.name,
            uri=self.track.uri,
            artist=artist,
            image_url=images[0].url if images else "",
            added_by=self.added_by.id if self.added_by else None,
        )


class SpotifyPlaylistTracksPage(_SpotifyModel):
    items: list[SpotifyPlaylistItem] = Field(default_factory=list)
    next: str | None = None
    total: int | None = None


class SpotifyPlaylist(_SpotifyModel):
    id: str = Field(..., min_length=1)
    name: str | None = None
