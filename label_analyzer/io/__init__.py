"""Filesystem output for scan results."""
