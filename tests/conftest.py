"""Shared fixtures: fake model clients and throwaway label images."""
from __future__ import annotations

import json

import pytest
from PIL import Image


FOOD_REPLY = {
    "isFood": True,
    "foodName": "Oat Crunch Granola",
    "ingredients": ["rolled oats", "cane sugar", "sunflower oil", "salt"],
    "nutrition": {
        "calories": 210,
        "protein": 5,
        "fat": 7,
        "carbs": 32,
        "fiber": 4,
        "sugar": 11,
    },
    "rating": 3,
    "verdict": "Moderate",
    "ingredientsToWatch": [
        {"name": "cane sugar", "reason": "Added sugar", "category": "limit"},
        {"name": "rolled oats", "reason": "Whole grain fiber", "category": "healthy"},
    ],
}


class FakeModelClient:
    """Records every request and answers with a canned reply."""

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, object]] = []

    def generate(self, prompt, payload):
        self.calls.append((prompt, payload))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def food_reply() -> dict:
    return json.loads(json.dumps(FOOD_REPLY))


@pytest.fixture
def fenced_food_reply(food_reply) -> str:
    return "Here is the analysis:\n```json\n" + json.dumps(food_reply, indent=2) + "\n```\nEnjoy!"


@pytest.fixture
def photo_path(tmp_path):
    path = tmp_path / "label.jpg"
    Image.new("RGB", (1000, 2000), (200, 180, 160)).save(path, format="JPEG")
    return path
