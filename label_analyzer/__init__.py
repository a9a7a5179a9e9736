"""AI-assisted nutritional assessment of food product labels."""

from .core import (
    AnalysisResult,
    CropRegion,
    FailureKind,
    FoodAnalysis,
    LabelAnalysisPipeline,
    LabelScan,
    NotFood,
    analyze_food_image,
)
from .imaging import Viewfinder, compute_crop_region, crop_to_viewfinder
from .parsing import extract_json_candidate, parse_analysis_response
from .utils import load_config

__all__ = [
    "AnalysisResult",
    "CropRegion",
    "FailureKind",
    "FoodAnalysis",
    "LabelAnalysisPipeline",
    "LabelScan",
    "NotFood",
    "Viewfinder",
    "analyze_food_image",
    "compute_crop_region",
    "crop_to_viewfinder",
    "extract_json_candidate",
    "load_config",
    "parse_analysis_response",
]
