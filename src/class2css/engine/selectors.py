"""Selector escaping for generated class rules."""

from __future__ import annotations

from class2css.constants.css import SELECTOR_ESCAPE_PATTERN


def escape_selector(class_name: str) -> str:
    """Escape characters that are not valid unescaped in a class selector."""
    return SELECTOR_ESCAPE_PATTERN.sub(r"\\\1", class_name)


def class_selector(class_name: str) -> str:
    return f".{escape_selector(class_name)}"
