"""High-level orchestration wiring crop, encode, model call and parsing."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from PIL import Image

from ..imaging.crop import Viewfinder, crop_to_viewfinder
from ..imaging.encode import ImagePayload, encode_image, load_captured_image
from ..model.prompts import ANALYSIS_PROMPT
from ..parsing.extract import GENERIC_FAILURE_MESSAGE, parse_analysis_response
from .types import AnalysisResult, CropRegion, FailureKind, ImageInput, NotFood


class LabelModelClient(Protocol):
    def generate(self, prompt: str, payload: ImagePayload) -> str: ...


@dataclass
class LabelScan:
    """Everything produced while scanning one image."""

    result: AnalysisResult
    image: Optional[Image.Image] = None
    crop_region: Optional[CropRegion] = None
    raw_response: Optional[str] = None


class LabelAnalysisPipeline:
    """Orchestrates load → viewfinder crop → JPEG encode → model → result mapping."""

    def __init__(
        self,
        client: LabelModelClient,
        viewfinder: Viewfinder | None = None,
        jpeg_quality: int = 80,
        prompt: str = ANALYSIS_PROMPT,
        use_model_reason: bool = False,
    ) -> None:
        self.client = client
        self.viewfinder = viewfinder
        self.jpeg_quality = int(jpeg_quality)
        self.prompt = prompt
        self.use_model_reason = bool(use_model_reason)

    def prepare(self, image_input: ImageInput) -> Tuple[Image.Image, Optional[CropRegion]]:
        captured = load_captured_image(image_input)
        if self.viewfinder is None:
            return captured.image, None
        return crop_to_viewfinder(captured.image, self.viewfinder)

    def scan(self, image_input: ImageInput) -> LabelScan:
        image: Optional[Image.Image] = None
        region: Optional[CropRegion] = None
        try:
            image, region = self.prepare(image_input)
            payload = encode_image(image, quality=self.jpeg_quality)
            raw = self.client.generate(self.prompt, payload)
        except Exception as exc:
            warnings.warn(f"Label analysis request failed: {exc}")
            return LabelScan(
                result=NotFood(GENERIC_FAILURE_MESSAGE, FailureKind.TRANSPORT),
                image=image,
                crop_region=region,
            )

        result = parse_analysis_response(raw, use_model_reason=self.use_model_reason)
        return LabelScan(result=result, image=image, crop_region=region, raw_response=raw)

    def analyze(self, image_input: ImageInput) -> AnalysisResult:
        return self.scan(image_input).result


def analyze_food_image(
    image_input: ImageInput, client: LabelModelClient | None = None
) -> AnalysisResult:
    """Functional helper mirroring :meth:`LabelAnalysisPipeline.analyze` with default settings.

    Scan failures come back as :class:`NotFood`. Building the default Gemini
    client is not part of the scan: without an API key this raises
    :class:`~label_analyzer.model.client.MissingApiKeyError` before any image
    is read.
    """
    if client is None:
        from ..model.client import GeminiLabelClient

        client = GeminiLabelClient()
    pipeline = LabelAnalysisPipeline(client, viewfinder=Viewfinder())
    return pipeline.analyze(image_input)


__all__ = ["LabelAnalysisPipeline", "LabelModelClient", "LabelScan", "analyze_food_image"]
