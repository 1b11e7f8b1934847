import base64
import binascii
import os
import re

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<data>.*)$", re.DOTALL)


def collapse(s: str) -> str:
    """
    Collapse runs of whitespace into one space and trim both ends.
    """
    return re.sub(r'\s+', ' ', s).strip()


def title_from_file_name(path: str) -> str:
    """
    "Artist - Song.mp3" -> "Artist - Song". Only the last extension is dropped,
    a name without extension is returned as is.
    """
    name = os.path.basename(path)
    stem, ext = os.path.splitext(name)
    if not ext or not stem:
        return name
    return stem


def to_data_url(mime_type: str, b64_data: str) -> str:
    return f"data:{mime_type};base64,{b64_data}"


def decode_data_url(url: str) -> tuple[str, bytes]:
    """
    Split a base64 `data:` URL into (mime type, raw bytes).
    Raises ValueError for anything else.
    """
    m = _DATA_URL_RE.match(url or "")
    if not m:
        raise ValueError("Not a base64 data URL")
    try:
        raw = base64.b64decode(m.group("data"), validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 payload: {e}") from e
    return m.group("mime"), raw
