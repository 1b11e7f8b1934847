# src/library/audio_file.py
from __future__ import annotations

import logging
import os

from mutagen import File as MutagenFile
from mutagen._util import MutagenError

from core.utils import collapse, title_from_file_name

logger = logging.getLogger(__name__)

AUDIO_EXTS = {".mp3", ".m4a", ".flac", ".ogg", ".opus", ".wav"}

AUDIO_FILE_FILTER = "Audio files ({});;All files (*)".format(
    " ".join(f"*{ext}" for ext in sorted(AUDIO_EXTS))
)


def is_audio_path(path: str) -> bool:
    return os.path.splitext(path)[1].lower() in AUDIO_EXTS


def _tag_title(path: str) -> str | None:
    try:
        audio = MutagenFile(path, easy=True)
    except (MutagenError, OSError) as e:
        logger.debug("Cannot read tags from %s: %s", path, e)
        return None
    if audio is None or not audio.tags:
        return None

    v = audio.get("title")
    if isinstance(v, list):
        v = v[0] if v else None
    if not v:
        return None
    return collapse(str(v)) or None


def read_song_title(path: str) -> str:
    """
    Best guess at the song title: the `title` tag when the file has one,
    otherwise the file name without its extension.
    """
    return _tag_title(path) or title_from_file_name(path)
