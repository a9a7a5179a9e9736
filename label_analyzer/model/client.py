"""Gemini transport for label analysis requests."""

from __future__ import annotations

import os
from typing import Any, Optional

from google import genai
from google.genai import types

from ..imaging.encode import ImagePayload

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_API_KEY_ENV = "GEMINI_API_KEY"


class MissingApiKeyError(RuntimeError):
    """Raised when no Gemini API key can be resolved."""


def resolve_api_key(
    api_key: Optional[str] = None, api_key_env: str = DEFAULT_API_KEY_ENV
) -> Optional[str]:
    """Explicit key first, then ``api_key_env``, then ``GOOGLE_API_KEY``."""
    if api_key:
        return api_key
    for name in (api_key_env, "GOOGLE_API_KEY"):
        value = os.getenv(name)
        if value:
            return value
    return None


class GeminiLabelClient:
    """Sends one prompt + inline image to a Gemini model and returns the reply text."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: str = DEFAULT_MODEL,
        api_key_env: str = DEFAULT_API_KEY_ENV,
        client: Any = None,
    ) -> None:
        self.model_name = model_name
        if client is None:
            key = resolve_api_key(api_key, api_key_env)
            if not key:
                raise MissingApiKeyError(
                    f"No Gemini API key found; set {api_key_env} or pass api_key"
                )
            client = genai.Client(api_key=key)
        self._client = client

    @classmethod
    def from_config(cls, cfg: dict) -> "GeminiLabelClient":
        model_cfg = cfg.get("model", {})
        return cls(
            api_key=model_cfg.get("api_key") or None,
            model_name=str(model_cfg.get("name", DEFAULT_MODEL)),
            api_key_env=str(model_cfg.get("api_key_env", DEFAULT_API_KEY_ENV)),
        )

    def generate(self, prompt: str, payload: ImagePayload) -> str:
        image_part = types.Part.from_bytes(data=payload.data, mime_type=payload.mime_type)
        response = self._client.models.generate_content(
            model=self.model_name,
            contents=[prompt, image_part],
        )
        return response.text or ""


__all__ = [
    "DEFAULT_MODEL",
    "GeminiLabelClient",
    "MissingApiKeyError",
    "resolve_api_key",
]
