"""Tests for SongSyncService."""

from unittest.mock import AsyncMock

import pytest

from party_dj.application.services.song_sync import SongSyncService
from party_dj.domain.rooms.repository import RoomRepository
from party_dj.domain.shared.exceptions import EntityNotFoundError, UpstreamFailureError


class TestSongSyncService:
    """Playlist listing -> room songs mirroring."""

    @pytest.mark.asyncio
    async def test_writes_positions_in_listing_order(
        self, room_repository, open_room, playlist_service, sample_tracks, stored_document
    ):
        await room_repository.set(open_room)
        playlist_service.list_tracks.return_value = list(reversed(sample_tracks))
        service = SongSyncService(room_repository=room_repository)

        tracks = await service.sync("abc123", "P1", playlist_service)

        assert [t.uri for t in tracks] == ["spotify:track:B", "spotify:track:A"]
        assert [t.position for t in tracks] == [0, 1]
        doc = await stored_document("abc123")
        assert doc["songs"][1] == {
            "name": "Song A",
            "artist": "Artist A",
            "imageUrl": "https://i.scdn.co/image/a",
            "uri": "spotify:track:A",
            "addedBy": "alice",
            "position": 1,
        }

    @pytest.mark.asyncio
    async def test_empty_playlist_clears_songs(
        self, room_repository, open_room, playlist_service, sample_tracks
    ):
        await room_repository.set(open_room.model_copy(update={"songs": sample_tracks}))
        playlist_service.list_tracks.return_value = []
        service = SongSyncService(room_repository=room_repository)

        assert await service.sync("abc123", "P1", playlist_service) == []
        assert (await room_repository.get("abc123")).songs == []

    @pytest.mark.asyncio
    async def test_only_songs_field_is_written(self, playlist_service, sample_tracks):
        repo = AsyncMock(spec=RoomRepository)
        playlist_service.list_tracks.return_value = sample_tracks
        service = SongSyncService(room_repository=repo)

        await service.sync("abc123", "P1", playlist_service)

        repo.update.assert_awaited_once()
        room_code, fields = repo.update.await_args.args
        assert room_code == "abc123"
        assert list(fields) == ["songs"]

    @pytest.mark.asyncio
    async def test_listing_failure(self, playlist_service):
        repo = AsyncMock(spec=RoomRepository)
        playlist_service.list_tracks.side_effect = RuntimeError("boom")
        service = SongSyncService(room_repository=repo)

        with pytest.raises(UpstreamFailureError) as exc_info:
            await service.sync("abc123", "P1", playlist_service)

        assert exc_info.value.message == "Spotify connection failed"
        repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_room(self, playlist_service):
        repo = AsyncMock(spec=RoomRepository)
        repo.update.side_effect = EntityNotFoundError("Room", "abc123")
        service = SongSyncService(room_repository=repo)

        with pytest.raises(UpstreamFailureError) as exc_info:
            await service.sync("abc123", "P1", playlist_service)

        assert exc_info.value.message == "Room store connection failed"
        assert exc_info.value.status_code == 401
