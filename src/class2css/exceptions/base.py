"""Root exception for class2css."""

from __future__ import annotations


class Class2CssError(Exception):
    """Base class for all class2css errors."""
