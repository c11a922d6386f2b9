"""Markup file reading with a short retry for editor save storms."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from class2css.constants.naming import READ_RETRY_ATTEMPTS, READ_RETRY_BASE_DELAY_SECONDS
from class2css.exceptions import MarkupParseError

logger = logging.getLogger(__name__)


async def read_markup(
    path: Path,
    *,
    attempts: int = READ_RETRY_ATTEMPTS,
    base_delay: float = READ_RETRY_BASE_DELAY_SECONDS,
) -> str:
    """Read a markup file as UTF-8 text.

    Editors often truncate or replace a file right before writing it, so an
    empty or missing file is retried with a growing delay. A file that stays
    empty is returned as ``""``; one that stays missing raises
    ``FileNotFoundError``.

    Raises:
        MarkupParseError: the file is not valid UTF-8.
    """
    for attempt in range(1, attempts + 1):
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            if attempt == attempts:
                raise
        except UnicodeDecodeError as exc:
            raise MarkupParseError(f"{path} is not valid UTF-8: {exc.reason}") from exc
        else:
            if text or attempt == attempts:
                return text
        logger.debug("Retrying read of %s (attempt %d/%d)", path, attempt, attempts)
        await asyncio.sleep(base_delay * attempt)
    return ""
