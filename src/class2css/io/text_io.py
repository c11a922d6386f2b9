"""Text read/write helpers with atomic persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from class2css.constants.naming import OUTPUT_TEMP_PREFIX, OUTPUT_TEMP_SUFFIX


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str = OUTPUT_TEMP_PREFIX,
    temp_suffix: str = OUTPUT_TEMP_SUFFIX,
) -> None:
    """Persist text atomically by writing to a temp file then renaming."""
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
            newline="",
        ) as handle:
            temp_name = handle.name
            handle.write(content)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)


def append_text(*, path: Path, content: str) -> None:
    """Append *content* to an existing file."""
    with path.open("a", encoding="utf-8", newline="") as handle:
        handle.write(content)


def read_text_if_exists(path: Path) -> str | None:
    """Return the file's text, or None when it does not exist."""
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
