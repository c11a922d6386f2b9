"""Constants for atomic output writes and markup read retries."""

from __future__ import annotations

OUTPUT_TEMP_PREFIX: str = ".class2css-"
OUTPUT_TEMP_SUFFIX: str = ".tmp"
READ_RETRY_ATTEMPTS: int = 3
READ_RETRY_BASE_DELAY_SECONDS: float = 0.08
