"""Markup parsing exceptions."""

from __future__ import annotations

from class2css.exceptions.base import Class2CssError


class MarkupParseError(Class2CssError, ValueError):
    """Raised when a markup fragment cannot be scanned for class attributes."""
