"""Map the on-screen viewfinder square onto a captured photo.

The capture screen shows a fixed square guide. Its position is expressed as
ratios of a reference screen and re-applied to whatever resolution the camera
delivered. Both crop sides are derived from the *width* ratio so the result
stays square; when the photo and the reference screen have different aspect
ratios the vertical placement is therefore approximate.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Tuple

from PIL import Image

from ..core.types import CropRegion


@dataclass(frozen=True)
class Viewfinder:
    """Viewfinder square in logical screen units."""

    size: float = 260.0
    top: float = 250.0
    screen_width: float = 390.0
    screen_height: float = 844.0

    @classmethod
    def from_config(cls, cfg: dict) -> "Viewfinder":
        """Build from a ``viewfinder`` config section; empty or non-numeric keys keep defaults."""

        def _value(key: str, positive: bool = False) -> float:
            default = getattr(cls, key)
            raw = cfg.get(key)
            if raw is None:
                return default
            try:
                value = float(raw)
            except (TypeError, ValueError):
                value = None
            if value is None or (positive and value <= 0):
                warnings.warn(f"Invalid viewfinder {key} {raw!r}; using {default}")
                return default
            return value

        return cls(
            size=_value("size", positive=True),
            top=_value("top"),
            screen_width=_value("screen_width", positive=True),
            screen_height=_value("screen_height", positive=True),
        )

    def ratios(self) -> Tuple[float, float, float]:
        """Return (origin_x_ratio, origin_y_ratio, size_ratio)."""
        left = (self.screen_width - self.size) / 2
        return (
            left / self.screen_width,
            self.top / self.screen_height,
            self.size / self.screen_width,
        )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_crop_region(
    photo_width: int, photo_height: int, viewfinder: Viewfinder | None = None
) -> CropRegion:
    viewfinder = viewfinder or Viewfinder()
    origin_x_ratio, origin_y_ratio, size_ratio = viewfinder.ratios()

    origin_x = _round_half_up(photo_width * origin_x_ratio)
    origin_y = _round_half_up(photo_height * origin_y_ratio)
    side = _round_half_up(photo_width * size_ratio)

    # Keep at least one pixel inside the photo on each axis.
    origin_x = min(max(origin_x, 0), photo_width - 1)
    origin_y = min(max(origin_y, 0), photo_height - 1)
    width = max(min(side, photo_width - origin_x), 1)
    height = max(min(side, photo_height - origin_y), 1)

    return CropRegion(origin_x=origin_x, origin_y=origin_y, width=width, height=height)


def crop_to_viewfinder(
    image: Image.Image, viewfinder: Viewfinder | None = None
) -> Tuple[Image.Image, CropRegion]:
    """Crop ``image`` to the viewfinder square and return the crop and its region."""
    region = compute_crop_region(image.size[0], image.size[1], viewfinder)
    return image.crop(region.box), region


__all__ = ["Viewfinder", "compute_crop_region", "crop_to_viewfinder"]
