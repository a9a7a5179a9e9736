"""Core orchestration and shared types for the label analyzer."""

from .pipeline import LabelAnalysisPipeline, LabelScan, analyze_food_image
from .types import (
    AnalysisResult,
    CapturedImage,
    CropRegion,
    FailureKind,
    FoodAnalysis,
    ImageInput,
    NotFood,
)

__all__ = [
    "LabelAnalysisPipeline",
    "LabelScan",
    "analyze_food_image",
    "AnalysisResult",
    "CapturedImage",
    "CropRegion",
    "FailureKind",
    "FoodAnalysis",
    "ImageInput",
    "NotFood",
]
