"""Generative model transport and prompt."""

from .client import DEFAULT_MODEL, GeminiLabelClient, MissingApiKeyError
from .prompts import ANALYSIS_PROMPT

__all__ = ["ANALYSIS_PROMPT", "DEFAULT_MODEL", "GeminiLabelClient", "MissingApiKeyError"]
