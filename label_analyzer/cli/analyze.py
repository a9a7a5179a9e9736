"""Main analysis command: scan one label image or a directory of them."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Set

from label_analyzer.core.pipeline import LabelAnalysisPipeline, LabelModelClient, LabelScan
from label_analyzer.imaging.crop import Viewfinder
from label_analyzer.io.results_writer import ResultsWriter
from label_analyzer.model.client import GeminiLabelClient
from label_analyzer.report import format_report


def iter_image_paths(target: Path, extensions: Set[str]) -> Iterable[Path]:
    """Yield ``target`` itself if it is a file, else every image under it."""
    if target.is_file():
        yield target
        return
    for path in sorted(target.rglob("*")):
        if path.is_file() and path.suffix.lower() in extensions:
            yield path


def build_pipeline_from_config(
    cfg: dict, client: LabelModelClient | None = None
) -> LabelAnalysisPipeline:
    """Build the analysis pipeline from a configuration dict."""
    viewfinder_cfg = cfg.get("viewfinder", {})
    viewfinder = (
        Viewfinder.from_config(viewfinder_cfg)
        if bool(viewfinder_cfg.get("enabled", True))
        else None
    )
    return LabelAnalysisPipeline(
        client=client or GeminiLabelClient.from_config(cfg),
        viewfinder=viewfinder,
        jpeg_quality=int(cfg.get("encoding", {}).get("quality", 80)),
        use_model_reason=bool(cfg.get("analysis", {}).get("use_model_reason", False)),
    )


def run_analysis(
    target: Path, cfg: dict, client: LabelModelClient | None = None
) -> List[LabelScan]:
    """Scan every image under ``target``, print a report and write results."""
    io_cfg = cfg.get("io", {})
    exts = {e.lower() for e in io_cfg.get("image_extensions", [".jpg", ".jpeg", ".png"])}

    images = list(iter_image_paths(target, exts))
    if not images:
        print(f"No images found in {target}")
        return []

    pipeline = build_pipeline_from_config(cfg, client=client)
    writer = ResultsWriter(
        results_dir=Path(io_cfg.get("results_dir", "results")),
        save_crops=bool(io_cfg.get("save_crops", False)),
        source_root=target,
    )

    scans: List[LabelScan] = []
    food_count = 0
    for image_path in images:
        scan = pipeline.scan(image_path)
        print(f"\n=== {image_path} ===")
        if scan.crop_region is not None:
            region = scan.crop_region
            print(
                f"Crop: {region.width}x{region.height} at ({region.origin_x}, {region.origin_y})"
            )
        print(format_report(scan.result))

        writer.write(image_path, scan)
        scans.append(scan)
        if scan.result.is_food:
            food_count += 1

    print(f"\nAnalyzed {len(scans)} image(s): {food_count} food label(s), "
          f"{len(scans) - food_count} rejected or failed")
    print(f"Results written to {writer.results_dir}")
    return scans


__all__ = ["build_pipeline_from_config", "iter_image_paths", "run_analysis"]
