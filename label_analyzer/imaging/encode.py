"""Image loading and JPEG/base64 encoding for model upload."""

from __future__ import annotations

import base64
import io
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from ..core.types import CapturedImage, ImageInput


@dataclass(frozen=True)
class ImagePayload:
    """Encoded image bytes ready to be attached to a model request."""

    data: bytes
    mime_type: str = "image/jpeg"

    @property
    def b64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


def load_captured_image(image_input: ImageInput) -> CapturedImage:
    """Open an image from disk (or wrap an in-memory one), honouring EXIF orientation."""
    if isinstance(image_input, Image.Image):
        return CapturedImage(image=image_input)
    path = Path(image_input)
    if not path.exists():
        raise FileNotFoundError(path)
    try:
        with Image.open(path) as handle:
            image = ImageOps.exif_transpose(handle)
            image.load()
    except UnidentifiedImageError as exc:
        raise UnidentifiedImageError(f"Unsupported image file: {path}") from exc
    return CapturedImage(image=image, source=path)


def encode_image(image: Image.Image, quality: int = 80) -> ImagePayload:
    """Re-encode ``image`` as JPEG; alpha and palette modes are flattened to RGB."""
    if image.mode != "RGB":
        image = image.convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format="JPEG", quality=int(quality))
    return ImagePayload(data=buffer.getvalue())


__all__ = ["ImagePayload", "encode_image", "load_captured_image"]
