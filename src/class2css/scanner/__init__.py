"""Markup discovery and merged scan state."""

from .coordinator import ScanCoordinator
from .discovery import discover_markup_files, is_markup_file, stable_path_key

__all__ = ["ScanCoordinator", "discover_markup_files", "is_markup_file", "stable_path_key"]
