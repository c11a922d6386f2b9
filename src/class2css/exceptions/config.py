"""Configuration-related exceptions."""

from __future__ import annotations

from class2css.exceptions.base import Class2CssError


class ConfigError(Class2CssError, ValueError):
    """Raised when build configuration is invalid."""
