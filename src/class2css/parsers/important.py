"""Importance marker detection for class tokens."""

from __future__ import annotations

from class2css.types.config import ImportantFlags


class ImportantFlagParser:
    """Strips configured ``!important`` markers from raw class tokens."""

    def __init__(self, flags: ImportantFlags) -> None:
        self._prefixes = tuple(sorted((p for p in flags.prefixes if p), key=len, reverse=True))
        self._suffixes = tuple(sorted((s for s in flags.suffixes if s), key=len, reverse=True))
        self._custom = tuple(sorted((c for c in flags.custom if c), key=len, reverse=True))

    def strip(self, raw: str) -> tuple[str, bool]:
        """Return ``(clean, is_important)`` for *raw*."""
        for prefix in self._prefixes:
            if raw.startswith(prefix) and len(raw) > len(prefix):
                return raw[len(prefix) :], True
        for suffix in self._suffixes:
            if raw.endswith(suffix) and len(raw) > len(suffix):
                return raw[: -len(suffix)], True
        for marker in self._custom:
            if marker in raw and raw != marker:
                return raw.replace(marker, "", 1), True
        return raw, False
