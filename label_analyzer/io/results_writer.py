"""Utility for writing scan outputs to disk.

This module centralizes all filesystem operations related to saving
analysis results so `main.py` and the CLI command can remain focused on
orchestration.
"""

from __future__ import annotations

import csv
import json
import warnings
from pathlib import Path

from ..core.pipeline import LabelScan


class ResultsWriter:
    """Encapsulates writing scan results and crop images.

    Responsibilities:
      - write per-image JSON payloads
      - append one summary CSV row per image
      - save the cropped image that was sent to the model
    """

    SUMMARY_FIELDS = [
        "image",
        "is_food",
        "failure",
        "food_name",
        "rating",
        "verdict",
        "calories",
    ]

    def __init__(
        self,
        results_dir: Path | str,
        save_crops: bool = False,
        source_root: Path | str | None = None,
    ) -> None:
        self.results_dir = Path(results_dir)
        self.save_crops = bool(save_crops)
        self.source_root = Path(source_root) if source_root is not None else None
        self._used_names: set[str] = set()
        self.results_dir.mkdir(parents=True, exist_ok=True)

    def _relative(self, image_path: Path) -> Path:
        if self.source_root is not None and self.source_root.is_dir():
            try:
                return image_path.relative_to(self.source_root)
            except ValueError:
                pass
        return Path(image_path.name)

    def output_name(self, image_path: Path) -> str:
        """Unique file stem for ``image_path`` within this results directory.

        Images in subfolders are flattened as ``sub__folder__stem``; a name
        already handed out (``label.jpg`` next to ``label.png``) gets a ``_2``,
        ``_3``... suffix.
        """
        base = "__".join(self._relative(image_path).with_suffix("").parts)
        name = base
        counter = 2
        while name in self._used_names:
            name = f"{base}_{counter}"
            counter += 1
        self._used_names.add(name)
        return name

    def write_result(self, image_path: Path, scan: LabelScan, name: str) -> None:
        """Write a per-image JSON payload with the crop region, result and raw reply."""
        payload = {
            "image": str(image_path),
            "crop": scan.crop_region.to_dict() if scan.crop_region else None,
            "result": scan.result.to_dict(),
            "raw_response": scan.raw_response,
        }
        output_path = self.results_dir / f"{name}.json"
        try:
            with output_path.open("w", encoding="utf-8") as handle:
                json.dump(payload, handle, indent=2, ensure_ascii=False)
        except Exception as exc:
            warnings.warn(f"Failed to write results JSON for {image_path}: {exc}")

    def append_summary(self, image_path: Path, scan: LabelScan) -> None:
        csv_path = self.results_dir / "summary.csv"
        write_headers = not csv_path.exists()

        result = scan.result
        row = {
            "image": self._relative(image_path).as_posix(),
            "is_food": result.is_food,
            "failure": "" if result.is_food else result.failure.value,
            "food_name": "",
            "rating": "",
            "verdict": "",
            "calories": "",
        }
        if result.is_food:
            nutrition = result.nutrition if isinstance(result.nutrition, dict) else {}
            row.update(
                food_name=result.name or "",
                rating="" if result.rating is None else result.rating,
                verdict=result.verdict or "",
                calories=nutrition.get("calories", ""),
            )

        try:
            with csv_path.open("a", newline="", encoding="utf-8") as csvfile:
                writer = csv.DictWriter(csvfile, fieldnames=self.SUMMARY_FIELDS)
                if write_headers:
                    writer.writeheader()
                writer.writerow(row)
        except Exception as exc:
            warnings.warn(f"Failed to write summary.csv: {exc}")

    def save_crop(self, image_path: Path, scan: LabelScan, name: str) -> None:
        if not self.save_crops or scan.image is None:
            return
        crops_dir = self.results_dir / "crops"
        try:
            crops_dir.mkdir(parents=True, exist_ok=True)
            scan.image.convert("RGB").save(crops_dir / f"{name}_crop.jpg", quality=90)
        except Exception as exc:
            warnings.warn(f"Crop save failed for {image_path}: {exc}")

    def write(self, image_path: Path, scan: LabelScan) -> None:
        name = self.output_name(image_path)
        self.write_result(image_path, scan, name)
        self.append_summary(image_path, scan)
        self.save_crop(image_path, scan, name)


__all__ = ["ResultsWriter"]
