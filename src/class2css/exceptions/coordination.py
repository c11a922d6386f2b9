"""Scan coordination exceptions."""

from __future__ import annotations

from class2css.exceptions.base import Class2CssError


class CoordinationError(Class2CssError, RuntimeError):
    """Raised when a full scan is requested while another one is in flight."""
