"""Result cache sizing and expiry defaults."""

from __future__ import annotations

DEFAULT_HOT_CAPACITY: int = 500
DEFAULT_HOT_TTL_SECONDS: float = 60.0
DEFAULT_WARM_CAPACITY: int = 5000
DEFAULT_WARM_TTL_SECONDS: float = 3600.0
DEFAULT_SWEEP_INTERVAL_SECONDS: float = 30.0

# Separates identity components of a cache key; cannot appear in a class token.
CACHE_KEY_SEPARATOR: str = "\x1f"
