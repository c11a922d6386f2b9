"""Persistence targets for generated CSS."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from class2css.io import append_text, read_text_if_exists, write_text_atomic


class OutputSink(Protocol):
    """Where the build writer persists text."""

    def write_text(self, path: Path, content: str) -> None: ...

    def append_text(self, path: Path, content: str) -> None: ...

    def read_text(self, path: Path) -> str | None: ...

    def remove(self, path: Path) -> bool: ...


class FileSystemSink:
    """Local file system sink with atomic full writes."""

    def write_text(self, path: Path, content: str) -> None:
        write_text_atomic(path=path, content=content)

    def append_text(self, path: Path, content: str) -> None:
        append_text(path=path, content=content)

    def read_text(self, path: Path) -> str | None:
        return read_text_if_exists(path)

    def remove(self, path: Path) -> bool:
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        return True
