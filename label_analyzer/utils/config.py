"""Lightweight configuration loader for the label analyzer.

- Prefers JSON config to avoid extra dependencies
- Optionally supports YAML if PyYAML is available
- Provides defaults matching the reference capture screen and model setup
"""

from __future__ import annotations

import copy
import json
import warnings
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULTS: Dict[str, Any] = {
    "model": {
        "name": "gemini-2.5-flash",
        "api_key_env": "GEMINI_API_KEY",
        "api_key": None,
    },
    "viewfinder": {
        "enabled": True,
        # Logical screen units of the reference device
        "size": 260,
        "top": 250,
        "screen_width": 390,
        "screen_height": 844,
    },
    "encoding": {
        "quality": 80,
    },
    "analysis": {
        "use_model_reason": False,
    },
    "io": {
        "image_extensions": [".jpg", ".jpeg", ".png", ".bmp", ".webp", ".heic"],
        "results_dir": "results",
        "save_crops": False,
    },
}


SEARCH_PATHS = ("config.json", "config.yaml", "config.yml")


def merge_config(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``override`` applied section by section."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _read_yaml(path: Path) -> Any:
    try:
        import yaml  # type: ignore
    except Exception as exc:
        warnings.warn(f"PyYAML not installed; ignoring YAML config '{path}' ({exc})")
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _read_json(path: Path) -> Any:
    return json.loads(path.read_text(encoding="utf-8"))


_READERS = {".json": _read_json, ".yaml": _read_yaml, ".yml": _read_yaml}


def _find_config(path: Optional[str | Path]) -> Optional[Path]:
    if path is not None:
        explicit = Path(path)
        if explicit.exists():
            return explicit
        warnings.warn(f"Config file not found: {explicit}. Using defaults.")
        return None
    return next((p for p in map(Path, SEARCH_PATHS) if p.exists()), None)


def load_config(path: Optional[str | Path] = None) -> Dict[str, Any]:
    """Return :data:`DEFAULTS` overlaid with the settings from a config file.

    An explicit ``path`` wins; otherwise ``config.json``, ``config.yaml`` and
    ``config.yml`` in the working directory are tried in that order. Unreadable
    or malformed files produce a warning and leave the defaults in place.
    """
    chosen = _find_config(path)
    if chosen is None:
        return copy.deepcopy(DEFAULTS)

    reader = _READERS.get(chosen.suffix.lower())
    if reader is None:
        warnings.warn(f"Unsupported config format: {chosen.suffix}. Using defaults.")
        return copy.deepcopy(DEFAULTS)

    try:
        data = reader(chosen)
    except Exception as exc:
        warnings.warn(f"Failed to load config from {chosen}: {exc}. Using defaults.")
        return copy.deepcopy(DEFAULTS)

    if not isinstance(data, dict):
        warnings.warn(f"Config at {chosen} is not a mapping. Using defaults.")
        return copy.deepcopy(DEFAULTS)
    return merge_config(DEFAULTS, data)


__all__ = ["DEFAULTS", "SEARCH_PATHS", "load_config", "merge_config"]
