from __future__ import annotations

import logging
from typing import Optional

import requests

from core.config import (
    DEFAULT_API_BASE_URL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_REQUEST_TIMEOUT_S,
    AppConfig,
)
from core.utils import to_data_url

logger = logging.getLogger(__name__)

ASPECT_RATIOS = ("1:1", "3:4", "4:3", "9:16", "16:9")
OUTPUT_MIME_TYPE = "image/jpeg"


class ImagenConfigError(RuntimeError):
    pass


class ImagenClient:
    """
    Text-to-image client for the Gemini API Imagen models.

    `generate` never raises for a failed generation: every failure is logged and
    turned into `None` so a caller looping over prompts can keep going.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_IMAGE_MODEL,
        base_url: str = DEFAULT_API_BASE_URL,
        timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
        session: requests.Session | None = None,
    ):
        self.api_key = (api_key or "").strip()
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    @classmethod
    def from_config(cls, config: AppConfig) -> "ImagenClient":
        return cls(
            api_key=config.api_key,
            model=config.image_model,
            base_url=config.api_base_url,
            timeout_s=config.request_timeout_s,
        )

    @property
    def predict_url(self) -> str:
        return f"{self.base_url}/models/{self.model}:predict"

    def _require_key(self) -> str:
        if not self.api_key:
            raise ImagenConfigError("Image API key is not configured. Set API_KEY (or GEMINI_API_KEY).")
        return self.api_key

    def _request(self, prompt: str, aspect_ratio: str) -> dict:
        # POST /models/{model}:predict  (one image per call)
        payload = {
            "instances": [{"prompt": prompt}],
            "parameters": {
                "sampleCount": 1,
                "aspectRatio": aspect_ratio,
                "outputMimeType": OUTPUT_MIME_TYPE,
            },
        }
        headers = {"x-goog-api-key": self._require_key()}
        r = self.session.post(self.predict_url, json=payload, headers=headers, timeout=self.timeout_s)
        if r.status_code != 200:
            raise requests.HTTPError(
                f"Image request failed with status {r.status_code}: {r.text}", response=r
            )
        return r.json()

    def generate(self, prompt: str, aspect_ratio: str = "1:1") -> Optional[str]:
        """
        Generate one image for `prompt`.

        Returns a `data:` URL, or None when the service produced nothing usable.
        An unsupported `aspect_ratio` is a programming error and raises ValueError.
        """
        if aspect_ratio not in ASPECT_RATIOS:
            raise ValueError(f"Unsupported aspect ratio: {aspect_ratio}")

        try:
            data = self._request(prompt, aspect_ratio)
        except ImagenConfigError as e:
            logger.error("%s", e)
            return None
        except requests.RequestException as e:
            logger.error("Error generating image from Gemini API: %s", e)
            if "Requested entity was not found." in str(e):
                logger.error("API key issue or model not found. Please check your API key and model access.")
            return None
        except ValueError as e:
            # response body was not JSON
            logger.error("Malformed response from Gemini API: %s", e)
            return None

        predictions = data.get("predictions") if isinstance(data, dict) else None
        first = predictions[0] if isinstance(predictions, list) and predictions else None
        b64 = first.get("bytesBase64Encoded") if isinstance(first, dict) else None

        if not b64:
            logger.error("No image data received from API.")
            return None

        mime = first.get("mimeType") or OUTPUT_MIME_TYPE
        return to_data_url(mime, b64)
