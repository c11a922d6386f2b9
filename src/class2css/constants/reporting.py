"""Constants for stdout status formatting."""

from __future__ import annotations

ANSI_GREEN: str = "\033[32m"
ANSI_YELLOW: str = "\033[33m"
ANSI_RED: str = "\033[31m"
ANSI_RESET: str = "\033[0m"

PHASE_COLORS: dict[str, str] = {
    "idle": ANSI_YELLOW,
    "scanning": ANSI_YELLOW,
    "settling": ANSI_YELLOW,
    "locked": ANSI_GREEN,
}

STATUS_DIAGNOSTIC_LIMIT: int = 10
