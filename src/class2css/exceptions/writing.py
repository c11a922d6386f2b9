"""Output persistence exceptions."""

from __future__ import annotations

from pathlib import Path

from class2css.exceptions.base import Class2CssError


class WriteError(Class2CssError, OSError):
    """Raised when an output target cannot be written."""

    def __init__(self, target: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to write {target}: {cause}")
        self.target = target
        self.cause = cause
