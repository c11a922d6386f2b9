"""Markup file discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_markup_files(
    paths: Iterable[Path],
    file_types: tuple[str, ...],
    *,
    root: Path | None = None,
) -> tuple[list[Path], list[Path]]:
    """Discover markup files under the configured entry paths.

    Entries may be directories (walked recursively) or single files. Returns
    ``(files, missing_entries)``; files are resolved, deduplicated and sorted
    by their path relative to *root*.
    """
    discovered: set[Path] = set()
    missing: list[Path] = []
    resolved_root = root.resolve() if root is not None else None

    for entry in paths:
        if not entry.exists():
            missing.append(entry)
            continue
        if entry.is_file():
            if is_markup_file(entry, file_types):
                discovered.add(entry.resolve())
            continue
        for path in entry.rglob("*"):
            if not path.is_file() or not is_markup_file(path, file_types):
                continue
            discovered.add(path.resolve())

    files = sorted(discovered, key=lambda path: stable_path_key(path, resolved_root))
    logger.debug("Discovered %d markup file(s)", len(files))
    return files, missing


def is_markup_file(path: Path, file_types: tuple[str, ...]) -> bool:
    """True when *path* has one of the configured extensions (without the dot)."""
    return path.suffix.lstrip(".").lower() in {file_type.lower() for file_type in file_types}


def stable_path_key(file_path: Path, root: Path | None) -> str:
    """Return a deterministic path key relative to *root* when possible."""
    if root is None:
        return file_path.as_posix()
    try:
        return file_path.relative_to(root).as_posix()
    except ValueError:
        return file_path.as_posix()
