from __future__ import annotations

import pytest

from core.utils import collapse, decode_data_url, title_from_file_name, to_data_url


@pytest.mark.parametrize("path,expected", [
    ("/music/Sunset Drive.mp3", "Sunset Drive"),
    ("My.Song.Name.flac", "My.Song.Name"),
    ("no_extension", "no_extension"),
    (".hidden", ".hidden"),
])
def test_title_from_file_name(path, expected) -> None:
    assert title_from_file_name(path) == expected


def test_collapse() -> None:
    assert collapse("  Sunset \n\t Drive  ") == "Sunset Drive"


def test_decode_data_url() -> None:
    assert decode_data_url(to_data_url("image/png", "aGk=")) == ("image/png", b"hi")


@pytest.mark.parametrize("url", [
    "",
    "https://example.test/image.jpg",
    "data:image/png,notbase64",
    "data:image/png;base64,@@@",
])
def test_decode_data_url_rejects_garbage(url) -> None:
    with pytest.raises(ValueError):
        decode_data_url(url)
