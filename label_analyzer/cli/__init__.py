"""CLI commands for the label analyzer."""

from .analyze import run_analysis

__all__ = ["run_analysis"]
