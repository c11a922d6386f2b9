"""Shared exception hierarchy for class2css."""

from __future__ import annotations

from .base import Class2CssError
from .config import ConfigError
from .coordination import CoordinationError
from .parsing import MarkupParseError
from .resolution import ResolutionError
from .writing import WriteError

__all__ = [
    "Class2CssError",
    "ConfigError",
    "CoordinationError",
    "MarkupParseError",
    "ResolutionError",
    "WriteError",
]
