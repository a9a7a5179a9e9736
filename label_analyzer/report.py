"""Console presentation of analysis results."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from .core.types import AnalysisResult, FailureKind, FoodAnalysis

FULL_STAR = "★"
HALF_STAR = "⯨"
EMPTY_STAR = "☆"

NUTRITION_FIELDS = (
    ("calories", "Calories", "kcal"),
    ("protein", "Protein", "g"),
    ("fat", "Fat", "g"),
    ("carbs", "Carbs", "g"),
    ("fiber", "Fiber", "g"),
    ("sugar", "Sugar", "g"),
)


def _as_number(value: Any) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def clamp_rating(rating: Any) -> Optional[float]:
    value = _as_number(rating)
    if value is None:
        return None
    return max(0.0, min(5.0, value))


def render_stars(rating: Any) -> str:
    """Five-glyph star bar followed by the numeric rating, e.g. ``★★★⯨☆ 3.5``."""
    value = clamp_rating(rating)
    if value is None:
        return ""
    full = int(value)
    has_half = value % 1 >= 0.5
    glyphs = []
    for index in range(5):
        if index < full:
            glyphs.append(FULL_STAR)
        elif index == full and has_half:
            glyphs.append(HALF_STAR)
        else:
            glyphs.append(EMPTY_STAR)
    return f"{''.join(glyphs)} {value:.1f}"


def rating_band(rating: Any) -> Optional[str]:
    value = _as_number(rating)
    if value is None:
        return None
    if value >= 4:
        return "good"
    if value >= 2.5:
        return "fair"
    return "poor"


def verdict_text(result: FoodAnalysis) -> str:
    """Model verdict, or a fallback derived from the rating."""
    if result.verdict:
        return str(result.verdict)
    value = _as_number(result.rating) or 0.0
    if value >= 4:
        return "Excellent Choice!"
    if value >= 3:
        return "Good Choice"
    return "Needs Improvement"


def category_label(category: Any) -> str:
    if not category:
        return "Review"
    text = str(category)
    return text[:1].upper() + text[1:]


def watch_list(result: FoodAnalysis) -> List[Dict[str, Any]]:
    """Ingredients-to-watch entries that have at least a name."""
    entries = result.ingredients_to_watch
    if not isinstance(entries, list):
        return []
    return [e for e in entries if isinstance(e, dict) and e.get("name")]


def format_nutrition_rows(nutrition: Any) -> List[str]:
    if not isinstance(nutrition, dict):
        return []
    rows = []
    for key, label, unit in NUTRITION_FIELDS:
        value = nutrition.get(key)
        if value is None:
            continue
        rows.append(f"  {label:<10} {value} {unit}")
    return rows


def format_report(result: AnalysisResult) -> str:
    """Multi-line plain-text report for one scan."""
    if not result.is_food:
        title = (
            "Not a Food Product"
            if result.failure is FailureKind.NOT_FOOD
            else "Analysis Failed"
        )
        return f"{title}: {result.reason}"

    lines = [f"Product: {result.name or 'Unknown product'}"]
    stars = render_stars(result.rating)
    if stars:
        lines.append(f"Rating:  {stars} ({rating_band(result.rating)})")
        lines.append(f"Verdict: {verdict_text(result)}")
    elif result.verdict:
        lines.append(f"Verdict: {result.verdict}")

    nutrition_rows = format_nutrition_rows(result.nutrition)
    if nutrition_rows:
        lines.append("Nutrition per serving:")
        lines.extend(nutrition_rows)

    if isinstance(result.ingredients, list) and result.ingredients:
        lines.append("Ingredients: " + ", ".join(str(i) for i in result.ingredients))

    watched = watch_list(result)
    if watched:
        lines.append("Ingredients to watch:")
        for entry in watched:
            reason = entry.get("reason") or ""
            line = f"  - [{category_label(entry.get('category'))}] {entry['name']}"
            if reason:
                line += f": {reason}"
            lines.append(line)
    return "\n".join(lines)


__all__ = [
    "category_label",
    "clamp_rating",
    "format_report",
    "rating_band",
    "render_stars",
    "verdict_text",
    "watch_list",
]
