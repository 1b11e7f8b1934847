"""
Tests for reading a song title from an audio file.
"""
from __future__ import annotations

from library.audio_file import AUDIO_FILE_FILTER, is_audio_path, read_song_title


def test_falls_back_to_file_name_for_untagged_file(tmp_path) -> None:
    path = tmp_path / "Sunset Drive.mp3"
    path.write_bytes(b"\x00" * 64)

    assert read_song_title(str(path)) == "Sunset Drive"


def test_falls_back_for_unknown_format(tmp_path) -> None:
    path = tmp_path / "Night.Ride.dat"
    path.write_bytes(b"not audio")

    assert read_song_title(str(path)) == "Night.Ride"


def test_missing_file_uses_file_name(tmp_path) -> None:
    assert read_song_title(str(tmp_path / "Gone.ogg")) == "Gone"


def test_title_tag_wins(monkeypatch, tmp_path) -> None:
    class FakeAudio(dict):
        tags = {"title": ["  Real   Title "]}

    path = tmp_path / "track01.mp3"
    path.write_bytes(b"")
    monkeypatch.setattr(
        "library.audio_file.MutagenFile",
        lambda p, easy=True: FakeAudio(title=["  Real   Title "]),
    )

    assert read_song_title(str(path)) == "Real Title"


def test_audio_path_detection() -> None:
    assert is_audio_path("/x/song.MP3")
    assert is_audio_path("song.flac")
    assert not is_audio_path("cover.jpg")
    assert "*.mp3" in AUDIO_FILE_FILTER
