# core/styles.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArtStyle:
    id: str
    name: str            # label shown next to the radio button
    prompt_suffix: str   # appended to the base prompt


ART_STYLES: tuple[ArtStyle, ...] = (
    ArtStyle("van-gogh", "Van Gogh", "in the style of Van Gogh, thick impasto oil painting, starry night colors"),
    ArtStyle("furry", "Furry", "as a furry art style character, vibrant, expressive, anthropomorphic"),
    ArtStyle("portrait", "Portrait", "as a highly detailed artistic portrait painting, realistic textures"),
    ArtStyle("cartoon", "Cartoon", "as a vibrant 2D cartoon drawing, clean lines, bold colors"),
    ArtStyle("crayon", "Crayon", "as a children's crayon drawing, textured, bright colors, hand-drawn feel"),
    ArtStyle("pixel-art", "Pixel Art", "as detailed pixel art, retro video game style, 8-bit aesthetic"),
    ArtStyle("cyberpunk", "Cyberpunk", "as a cyberpunk art style illustration, neon lights, futuristic city, dark atmosphere"),
)

DEFAULT_STYLE_ID = ART_STYLES[0].id

_BY_ID = {s.id: s for s in ART_STYLES}


def find_style(style_id: str | None) -> Optional[ArtStyle]:
    if not style_id:
        return None
    return _BY_ID.get(style_id)
