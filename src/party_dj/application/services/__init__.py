"""Application services shared by several handlers."""

from party_dj.application.services.playlist_session import playlist_session
from party_dj.application.services.song_sync import SongSyncService

__all__ = ["SongSyncService", "playlist_session"]
