"""Rule resolution exceptions."""

from __future__ import annotations

from class2css.exceptions.base import Class2CssError


class ResolutionError(Class2CssError, ValueError):
    """Raised when a class token cannot be turned into declarations."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"{token}: {reason}")
        self.token = token
        self.reason = reason
