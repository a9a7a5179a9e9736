"""CLI entry point for analyzing food label photos with configurable settings.

This is a thin main module that delegates to the analysis command.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from label_analyzer.cli import run_analysis
from label_analyzer.model.client import MissingApiKeyError
from label_analyzer.utils.config import load_config


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Analyze food label photos and rate their nutritional quality."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default="data",
        help="Image file or directory containing label photos",
    )
    parser.add_argument(
        "--config", dest="config", default=None,
        help="Path to JSON/YAML config file"
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Gemini model name override",
    )
    parser.add_argument(
        "--no-crop", action="store_true",
        help="Send the full photo instead of the viewfinder crop"
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=None,
        help="JPEG quality used when encoding the upload (1-95)",
    )
    parser.add_argument(
        "--use-model-reason",
        action="store_true",
        help="Show the model's own explanation when an image is not a food label",
    )
    parser.add_argument(
        "--results-dir",
        default=None,
        help="Where to write JSON/CSV outputs (overrides config)",
    )
    parser.add_argument(
        "--save-crops",
        action="store_true",
        help="Also save the cropped image sent to the model",
    )
    return parser.parse_args(argv)


def apply_overrides(cfg: dict, args: argparse.Namespace) -> dict:
    """Apply command line overrides to configuration."""
    cfg = json.loads(json.dumps(cfg))  # deep copy

    if args.model:
        cfg.setdefault("model", {})["name"] = str(args.model)
    if args.no_crop:
        cfg.setdefault("viewfinder", {})["enabled"] = False
    if args.quality is not None:
        cfg.setdefault("encoding", {})["quality"] = max(1, min(95, int(args.quality)))
    if args.use_model_reason:
        cfg.setdefault("analysis", {})["use_model_reason"] = True
    if args.results_dir is not None:
        cfg.setdefault("io", {})["results_dir"] = str(args.results_dir)
    if args.save_crops:
        cfg.setdefault("io", {})["save_crops"] = True

    return cfg


def main(argv: list[str]) -> int:
    """Main entry point."""
    args = parse_args(argv)

    target = Path(args.path)
    if not target.exists():
        print(f"Path not found: {target}")
        return 1

    cfg = load_config(args.config)
    cfg = apply_overrides(cfg, args)

    try:
        run_analysis(target, cfg)
    except MissingApiKeyError as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
