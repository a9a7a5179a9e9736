"""Viewfinder cropping and upload encoding."""

from .crop import Viewfinder, compute_crop_region, crop_to_viewfinder
from .encode import ImagePayload, encode_image, load_captured_image

__all__ = [
    "Viewfinder",
    "compute_crop_region",
    "crop_to_viewfinder",
    "ImagePayload",
    "encode_image",
    "load_captured_image",
]
