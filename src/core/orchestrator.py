"""
Image generation run for one song.

A run builds one prompt per image from the song title and the selected art
style, calls the image client once per prompt, strictly one after another,
and folds the results into a single `Outcome`. Failed calls are skipped, never
retried; `run` itself never raises for generation problems.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional, Protocol

from core.styles import ArtStyle, find_style

logger = logging.getLogger(__name__)

MSG_MISSING_INPUT = "Please provide a song title and select an art style."
MSG_STYLE_NOT_FOUND = "Selected art style not found."
MSG_NO_IMAGES = "Failed to generate any images. Please try again with a different title or style."
MSG_UNEXPECTED = "An unexpected error occurred during image generation."
MSG_BAD_COUNT = "Nothing to generate: the image count must be at least 1."


class ImageGenerator(Protocol):
    def generate(self, prompt: str) -> Optional[str]: ...


class ValidationError(ValueError):
    pass


class OutcomeStatus(Enum):
    FULL = auto()
    PARTIAL = auto()
    FAILED = auto()


@dataclass(frozen=True)
class Outcome:
    status: OutcomeStatus
    images: tuple[str, ...] = ()
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is not OutcomeStatus.FAILED

    @classmethod
    def failed(cls, message: str) -> "Outcome":
        return cls(status=OutcomeStatus.FAILED, images=(), message=message)


@dataclass(frozen=True)
class GenerationRequest:
    song_title: str
    style: ArtStyle


def validate_request(song_title: str | None, style_id: str | None) -> GenerationRequest:
    """Raise ValidationError with a user-facing message, or return a ready request."""
    title = (song_title or "").strip()
    if not title or not style_id:
        raise ValidationError(MSG_MISSING_INPUT)

    style = find_style(style_id)
    if style is None:
        raise ValidationError(MSG_STYLE_NOT_FOUND)

    return GenerationRequest(song_title=title, style=style)


def build_base_prompt(song_title: str, style: ArtStyle) -> str:
    return f'Generate an image for a song titled "{song_title}" {style.prompt_suffix}'


def build_variation_prompt(base_prompt: str, variation: int) -> str:
    # The variation marker nudges the model towards different images per call.
    return f"{base_prompt}. Variation {variation}."


ProgressCallback = Callable[[int, int], None]


class GenerationOrchestrator:
    def __init__(self, client: ImageGenerator):
        self.client = client

    def run(
        self,
        song_title: str,
        style: ArtStyle,
        count: int,
        progress: ProgressCallback | None = None,
    ) -> Outcome:
        if count < 1:
            logger.error("Refusing generation run with count=%d", count)
            return Outcome.failed(MSG_BAD_COUNT)

        images: list[str] = []
        base_prompt = build_base_prompt(song_title, style)

        try:
            for i in range(1, count + 1):
                if progress:
                    progress(i, count)

                image = self.client.generate(build_variation_prompt(base_prompt, i))
                if image:
                    images.append(image)
                else:
                    logger.warning("Failed to generate image %d.", i)
        except Exception:
            logger.exception("Error during image generation loop")
            return Outcome.failed(MSG_UNEXPECTED)

        if not images:
            logger.info("Generation for %r (%s) produced no images", song_title, style.id)
            return Outcome.failed(MSG_NO_IMAGES)

        status = OutcomeStatus.FULL if len(images) == count else OutcomeStatus.PARTIAL
        logger.info("Generated %d/%d images for %r (%s)", len(images), count, song_title, style.id)
        return Outcome(status=status, images=tuple(images))

    def run_request(self, request: GenerationRequest, count: int,
                    progress: ProgressCallback | None = None) -> Outcome:
        return self.run(request.song_title, request.style, count, progress=progress)
