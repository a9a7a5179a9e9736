"""Shared dataclasses and type aliases used across label analyzer components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from PIL import Image


ImageInput = Union[str, Path, Image.Image]


class FailureKind(str, Enum):
    """Why a scan did not produce a food analysis."""

    TRANSPORT = "transport"
    PARSE = "parse"
    NOT_FOOD = "not_food"


@dataclass
class CapturedImage:
    """A photo as delivered by the capture step, before cropping."""

    image: Image.Image
    source: Optional[Path] = None

    @property
    def width(self) -> int:
        return self.image.size[0]

    @property
    def height(self) -> int:
        return self.image.size[1]


@dataclass(frozen=True)
class CropRegion:
    """Pixel rectangle on the captured photo."""

    origin_x: int
    origin_y: int
    width: int
    height: int

    @property
    def box(self) -> Tuple[int, int, int, int]:
        """(left, top, right, bottom) as expected by :meth:`PIL.Image.Image.crop`."""
        return (
            self.origin_x,
            self.origin_y,
            self.origin_x + self.width,
            self.origin_y + self.height,
        )

    def to_dict(self) -> Dict[str, int]:
        return {
            "originX": self.origin_x,
            "originY": self.origin_y,
            "width": self.width,
            "height": self.height,
        }


@dataclass(frozen=True)
class NotFood:
    """Scan outcome when no food analysis is available."""

    reason: str
    failure: FailureKind = FailureKind.NOT_FOOD

    @property
    def is_food(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {"isFood": False, "error": self.reason, "failure": self.failure.value}


@dataclass(frozen=True)
class FoodAnalysis:
    """Nutritional assessment of a food label, values copied from the model reply."""

    name: Optional[str] = None
    ingredients: Optional[List[Any]] = None
    nutrition: Optional[Dict[str, Any]] = None
    rating: Optional[float] = None
    verdict: Optional[str] = None
    ingredients_to_watch: Optional[List[Any]] = field(default=None)

    @property
    def is_food(self) -> bool:
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "isFood": True,
            "foodName": self.name,
            "ingredients": self.ingredients,
            "nutrition": self.nutrition,
            "rating": self.rating,
            "verdict": self.verdict,
            "ingredientsToWatch": self.ingredients_to_watch,
        }


AnalysisResult = Union[FoodAnalysis, NotFood]
