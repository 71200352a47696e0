"""
Unit Tests for the Rooms Domain

Tests for:
- generate_code (length, alphabet, determinism with a seeded source)
- Track value object (aliases, empty placeholder, positioning)
- Room aggregate (open, document round trip)
"""

import random
import string

import pytest
from pydantic import ValidationError

from party_dj.domain.rooms.code_generator import (
    DEFAULT_ROOM_CODE_LENGTH,
    ROOM_CODE_ALPHABET,
    generate_code,
)
from party_dj.domain.rooms.entities import Room, Track

# =============================================================================
# Code Generator Tests
# =============================================================================


class TestGenerateCode:
    """Unit tests for generate_code."""

    @pytest.mark.parametrize("length", [1, 6, 12, 32])
    def test_code_has_requested_length(self, length):
        assert len(generate_code(length)) == length

    def test_default_length_is_six(self):
        assert DEFAULT_ROOM_CODE_LENGTH == 6
        assert len(generate_code()) == 6

    def test_zero_length_gives_empty_string(self):
        assert generate_code(0) == ""

    def test_negative_length_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            generate_code(-1)

    def test_only_alphabet_characters(self):
        for _ in range(200):
            assert set(generate_code(8)) <= set(ROOM_CODE_ALPHABET)

    def test_alphabet_excludes_ambiguous_characters(self):
        assert len(ROOM_CODE_ALPHABET) == 34
        assert "0" not in ROOM_CODE_ALPHABET
        assert "l" not in ROOM_CODE_ALPHABET
        assert "o" in ROOM_CODE_ALPHABET
        assert not set(ROOM_CODE_ALPHABET) & set(string.ascii_uppercase)

    def test_seeded_source_is_deterministic(self):
        first = generate_code(10, rng=random.Random(42))
        second = generate_code(10, rng=random.Random(42))
        assert first == second


# =============================================================================
# Track Tests
# =============================================================================


class TestTrack:
    """Unit tests for the Track value object."""

    def test_empty_track_has_blank_fields(self):
        track = Track.empty()
        assert track.is_empty
        assert track.to_document() == {"name": "", "artist": "", "imageUrl": "", "uri": ""}

    def test_document_uses_camel_case(self, sample_tracks):
        doc = sample_tracks[0].to_document()
        assert doc == {
            "name": "Song A",
            "artist": "Artist A",
            "imageUrl": "https://i.scdn.co/image/a",
            "uri": "spotify:track:A",
            "addedBy": "alice",
        }

    def test_missing_contributor_is_omitted(self, sample_tracks):
        assert "addedBy" not in sample_tracks[1].to_document()

    def test_at_position_returns_copy(self, sample_tracks):
        placed = sample_tracks[1].at_position(1)
        assert placed.position == 1
        assert sample_tracks[1].position is None
        assert placed.to_document()["position"] == 1

    def test_negative_position_rejected(self):
        with pytest.raises(ValidationError):
            Track(uri="spotify:track:A", position=-1)

    def test_track_is_frozen(self, sample_tracks):
        with pytest.raises(ValidationError):
            sample_tracks[0].name = "Other"

    def test_accepts_camel_case_input(self):
        track = Track.model_validate({"imageUrl": "x", "addedBy": "bob", "uri": "u"})
        assert track.image_url == "x"
        assert track.added_by == "bob"


# =============================================================================
# Room Tests
# =============================================================================


class TestRoom:
    """Unit tests for the Room aggregate."""

    def test_open_room_defaults(self, open_room):
        assert open_room.enabled is True
        assert open_room.songs == []
        assert len(open_room.songs) == 0
        assert open_room.current_song.is_empty

    def test_document_shape(self, open_room):
        assert open_room.to_document() == {
            "owner": "alice",
            "playlistId": "P1",
            "enabled": True,
            "songs": [],
            "currentSong": {"name": "", "artist": "", "imageUrl": "", "uri": ""},
        }

    def test_document_round_trip(self, open_room, sample_tracks):
        room = open_room.model_copy(update={"songs": sample_tracks})
        restored = Room.from_document("abc123", room.to_document())
        assert restored.room_code == "abc123"
        assert [song.uri for song in restored.songs] == ["spotify:track:A", "spotify:track:B"]
        assert restored.playlist_id == "P1"

    def test_from_document_tolerates_missing_reserved_fields(self):
        room = Room.from_document("xyz789", {"owner": "bob", "playlistId": "P9"})
        assert room.enabled is True
        assert room.songs == []
        assert room.current_song.is_empty

    def test_empty_room_code_rejected(self):
        with pytest.raises(ValidationError):
            Room.open("", "alice", "P1")
