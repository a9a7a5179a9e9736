"""Shared utilities and configuration handling."""

from .config import load_config

__all__ = ["load_config"]
