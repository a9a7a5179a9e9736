"""Pull a JSON object out of free-form model text and map it to a result.

Models are asked for bare JSON but routinely wrap it in markdown fences or
add commentary around it. Extraction tries, in order, a fenced block, the
span from the first ``{`` to the last ``}``, and finally the raw text. Every
step is total: anything that cannot be parsed ends as a :class:`NotFood`.
"""

from __future__ import annotations

import json
import re
import warnings
from typing import Any, Dict, Optional

from ..core.types import AnalysisResult, FailureKind, FoodAnalysis, NotFood

GENERIC_FAILURE_MESSAGE = "Failed to analyze the image. Please try again."
NOT_FOOD_MESSAGE = (
    "This doesn't appear to be a food product packaging. "
    "Please scan a food item's back label."
)

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{[\s\S]*\})\s*```")


def extract_json_candidate(text: str) -> str:
    """Return the substring of ``text`` most likely to hold the JSON object."""
    match = _FENCED_JSON.search(text)
    if match:
        return match.group(1)
    start = text.find("{")
    end = text.rfind("}") + 1
    if start != -1 and end > start:
        return text[start:end]
    return text


_UNPARSEABLE = object()


def _load_candidate(text: str) -> Any:
    candidate = extract_json_candidate(text)
    try:
        return json.loads(candidate)
    except (TypeError, ValueError, RecursionError) as exc:
        warnings.warn(f"Could not parse model response as JSON: {exc}")
        return _UNPARSEABLE


def parse_json_candidate(text: str) -> Optional[Dict[str, Any]]:
    """Parse the extracted candidate; ``None`` when it is not a JSON object."""
    data = _load_candidate(text)
    if not isinstance(data, dict):
        return None
    return data


def _model_reason(data: Dict[str, Any]) -> Optional[str]:
    for key in ("error", "reason", "message"):
        value = data.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def parse_analysis_response(text: str, use_model_reason: bool = False) -> AnalysisResult:
    """Map raw model text to :class:`FoodAnalysis` or :class:`NotFood`.

    Sub-fields of a food reply are copied as-is, missing ones become ``None``.
    Text that is not JSON (or is JSON ``null``) is a parse failure; any other
    JSON value without a truthy ``isFood`` is treated as not food.
    A non-food reply carries :data:`NOT_FOOD_MESSAGE` unless
    ``use_model_reason`` is set and the model supplied its own explanation.
    """
    data = _load_candidate(text or "")
    if data is _UNPARSEABLE or data is None:
        return NotFood(GENERIC_FAILURE_MESSAGE, FailureKind.PARSE)

    # Scalars and arrays carry no isFood flag.
    if not isinstance(data, dict):
        return NotFood(NOT_FOOD_MESSAGE, FailureKind.NOT_FOOD)

    if not data.get("isFood"):
        reason = _model_reason(data) if use_model_reason else None
        return NotFood(reason or NOT_FOOD_MESSAGE, FailureKind.NOT_FOOD)

    return FoodAnalysis(
        name=data.get("foodName"),
        ingredients=data.get("ingredients"),
        nutrition=data.get("nutrition"),
        rating=data.get("rating"),
        verdict=data.get("verdict"),
        ingredients_to_watch=data.get("ingredientsToWatch"),
    )


__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "NOT_FOOD_MESSAGE",
    "extract_json_candidate",
    "parse_json_candidate",
    "parse_analysis_response",
]
