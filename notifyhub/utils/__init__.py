"""Utility helpers for reusable functionality."""

from .datetime import localize, now_in, resolve_timezone, to_storage

__all__ = ["localize", "now_in", "resolve_timezone", "to_storage"]
