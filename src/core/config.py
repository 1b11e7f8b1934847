from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

SLIDESHOW_INTERVAL_MS = 7000  # 7 seconds
NUMBER_OF_IMAGES_TO_GENERATE = 3

DEFAULT_IMAGE_MODEL = "imagen-4.0-generate-001"
DEFAULT_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_REQUEST_TIMEOUT_S = 60.0

MIN_SLIDESHOW_INTERVAL_MS = 100


@dataclass(frozen=True)
class AppConfig:
    api_key: str = ""
    image_model: str = DEFAULT_IMAGE_MODEL
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S
    image_count: int = NUMBER_OF_IMAGES_TO_GENERATE
    slideshow_interval_ms: int = SLIDESHOW_INTERVAL_MS

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def _env_int(name: str, default: int, minimum: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got {value}")
    return value


def load_config(dotenv: bool = True) -> AppConfig:
    """
    Read the static app configuration from the environment.
    A `.env` file in the working directory is honoured unless `dotenv=False`.
    """
    if dotenv:
        load_dotenv()

    api_key = (os.getenv("API_KEY") or os.getenv("GEMINI_API_KEY") or "").strip()
    base_url = (os.getenv("SONGCANVAS_API_BASE_URL") or DEFAULT_API_BASE_URL).strip().rstrip("/")

    return AppConfig(
        api_key=api_key,
        image_model=(os.getenv("SONGCANVAS_IMAGE_MODEL") or DEFAULT_IMAGE_MODEL).strip(),
        api_base_url=base_url,
        request_timeout_s=_env_float("SONGCANVAS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_S),
        image_count=_env_int("SONGCANVAS_IMAGE_COUNT", NUMBER_OF_IMAGES_TO_GENERATE, 1),
        slideshow_interval_ms=_env_int(
            "SONGCANVAS_SLIDESHOW_INTERVAL_MS", SLIDESHOW_INTERVAL_MS, MIN_SLIDESHOW_INTERVAL_MS
        ),
    )
