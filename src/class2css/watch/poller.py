"""Stat-polling file watcher."""

from __future__ import annotations

import logging
from pathlib import Path

from class2css.model import FileEvent
from class2css.scanner.discovery import discover_markup_files

logger = logging.getLogger(__name__)

type FileSignature = tuple[int, int]


class PollingWatcher:
    """Detects markup file changes by comparing ``(mtime_ns, size)`` snapshots.

    The first :meth:`poll` only records a baseline. Events come out sorted by
    path within one poll; callers must still tolerate duplicates.
    """

    def __init__(self, paths: tuple[Path, ...], file_types: tuple[str, ...], *, root: Path | None = None) -> None:
        self._paths = paths
        self._file_types = file_types
        self._root = root
        self._signatures: dict[Path, FileSignature] | None = None

    def poll(self) -> list[FileEvent]:
        current = self._snapshot()
        previous, self._signatures = self._signatures, current
        if previous is None:
            return []

        events: list[FileEvent] = []
        for path in sorted(previous.keys() | current.keys()):
            before = previous.get(path)
            after = current.get(path)
            if before is None:
                events.append(FileEvent(type="add", path=path))
            elif after is None:
                events.append(FileEvent(type="unlink", path=path))
            elif before != after:
                events.append(FileEvent(type="change", path=path))
        if events:
            logger.debug("Detected %d file change(s)", len(events))
        return events

    def _snapshot(self) -> dict[Path, FileSignature]:
        files, _missing = discover_markup_files(self._paths, self._file_types, root=self._root)
        signatures: dict[Path, FileSignature] = {}
        for path in files:
            try:
                stat = path.stat()
            except OSError:
                continue
            signatures[path] = (stat.st_mtime_ns, stat.st_size)
        return signatures
