"""Model response parsing."""

from .extract import (
    GENERIC_FAILURE_MESSAGE,
    NOT_FOOD_MESSAGE,
    extract_json_candidate,
    parse_analysis_response,
    parse_json_candidate,
)

__all__ = [
    "GENERIC_FAILURE_MESSAGE",
    "NOT_FOOD_MESSAGE",
    "extract_json_candidate",
    "parse_analysis_response",
    "parse_json_candidate",
]
