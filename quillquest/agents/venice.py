from typing import Any, Dict, Optional

import requests

from quillquest.core.config import Settings
from quillquest.core.logger import get_logger

logger = get_logger("venice")

CHAT_COMPLETIONS_PATH = "/api/v1/chat/completions"
IMAGE_GENERATE_PATH = "/api/v1/image/generate"


class VeniceError(RuntimeError):
    """Raised when Venice answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Venice API error: {status_code} - {body}")
        self.status_code = status_code
        self.body = body


class VeniceClient:
    """
    Thin client over the two Venice.ai endpoints the app uses.

    Every call sends the bearer key from the settings it was built with.
    Failures are not retried.
    """

    def __init__(self, settings: Settings):
        self.base_url = settings.VENICE_API_URL
        self.text_model = settings.VENICE_TEXT_MODEL
        self.image_model = settings.VENICE_IMAGE_MODEL
        self.timeout = settings.VENICE_TIMEOUT
        self._headers = {
            "Authorization": f"Bearer {settings.VENICE_API_KEY}",
            "Content-Type": "application/json",
        }

    def _post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        resp = requests.post(
            f"{self.base_url}{path}",
            json=payload,
            headers=self._headers,
            timeout=self.timeout,
        )
        if not resp.ok:
            raise VeniceError(resp.status_code, resp.text)
        return resp.json()

    def generate_text(self, prompt: str, max_tokens: int = 500, temperature: float = 0.8) -> str:
        """
        Single-turn chat completion.
        Returns the first choice's content, or "" when the envelope has none.
        """
        data = self._post(CHAT_COMPLETIONS_PATH, {
            "model": self.text_model,
            "messages": [
                {"role": "user", "content": prompt}
            ],
            "max_tokens": max_tokens,
            "temperature": temperature,
        })
        logger.debug(f"Text completion ({self.text_model}, max_tokens={max_tokens})")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError):
            return ""
        return content if isinstance(content, str) else ""

    def generate_image(
        self,
        prompt: str,
        style: str = "realistic",
        width: int = 1024,
        height: int = 1024,
    ) -> Optional[str]:
        """
        Generates one image.
        Returns its URL, or the base64 payload when no URL is given, or None.
        """
        data = self._post(IMAGE_GENERATE_PATH, {
            "prompt": prompt,
            "style_preset": style,
            "width": width,
            "height": height,
            "model": self.image_model,
        })
        logger.debug(f"Image generation ({self.image_model}, {width}x{height})")

        images = data.get("images") if isinstance(data, dict) else None
        if not images or not isinstance(images, list):
            return None

        first = images[0]
        if isinstance(first, str):
            return first or None
        if isinstance(first, dict):
            return first.get("url") or first.get("b64_json") or None
        return None
