"""Tests for console presentation of results."""
from label_analyzer.core.types import FailureKind, FoodAnalysis, NotFood
from label_analyzer.report import (
    category_label,
    clamp_rating,
    format_report,
    rating_band,
    render_stars,
    verdict_text,
    watch_list,
)


def test_render_stars_with_half():
    assert render_stars(3.5) == "★★★⯨☆ 3.5"
    assert render_stars(5) == "★★★★★ 5.0"
    assert render_stars(None) == ""


def test_rating_is_clamped():
    assert clamp_rating(7) == 5.0
    assert clamp_rating(-2) == 0.0
    assert clamp_rating("n/a") is None
    assert render_stars(9).endswith("5.0")


def test_rating_band_thresholds():
    assert rating_band(4) == "good"
    assert rating_band(2.5) == "fair"
    assert rating_band(2.4) == "poor"
    assert rating_band(None) is None


def test_verdict_fallbacks():
    assert verdict_text(FoodAnalysis(verdict="Healthy Choice", rating=1)) == "Healthy Choice"
    assert verdict_text(FoodAnalysis(rating=4)) == "Excellent Choice!"
    assert verdict_text(FoodAnalysis(rating=3)) == "Good Choice"
    assert verdict_text(FoodAnalysis(rating=2)) == "Needs Improvement"


def test_category_label():
    assert category_label("avoid") == "Avoid"
    assert category_label(None) == "Review"


def test_watch_list_skips_entries_without_name():
    result = FoodAnalysis(
        ingredients_to_watch=[{"name": "salt"}, {"reason": "?"}, "sugar", None]
    )
    assert watch_list(result) == [{"name": "salt"}]
    assert watch_list(FoodAnalysis(ingredients_to_watch="oops")) == []


def test_format_report_for_food(food_reply):
    result = FoodAnalysis(
        name=food_reply["foodName"],
        ingredients=food_reply["ingredients"],
        nutrition=food_reply["nutrition"],
        rating=food_reply["rating"],
        verdict=food_reply["verdict"],
        ingredients_to_watch=food_reply["ingredientsToWatch"],
    )
    report = format_report(result)

    assert "Product: Oat Crunch Granola" in report
    assert "★★★☆☆ 3.0 (fair)" in report
    assert "Verdict: Moderate" in report
    assert "Calories   210 kcal" in report
    assert "[Limit] cane sugar: Added sugar" in report


def test_format_report_titles_for_failures():
    assert format_report(NotFood("Scan a label.")).startswith("Not a Food Product:")
    assert format_report(NotFood("Try again.", FailureKind.PARSE)).startswith(
        "Analysis Failed:"
    )
