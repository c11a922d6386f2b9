"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "class2css.yaml"

CSS_FORMAT_MULTILINE: str = "multiline"
CSS_FORMAT_SINGLELINE: str = "singleline"
CSS_FORMAT_COMPRESSED: str = "compressed"
VALID_CSS_FORMATS: frozenset[str] = frozenset(
    {CSS_FORMAT_MULTILINE, CSS_FORMAT_SINGLELINE, CSS_FORMAT_COMPRESSED}
)

OUTPUT_MODE_SEPARATE: str = "separate"
OUTPUT_MODE_UNIFILE: str = "uniFile"
VALID_OUTPUT_MODES: frozenset[str] = frozenset({OUTPUT_MODE_SEPARATE, OUTPUT_MODE_UNIFILE})

WRITE_MODE_REWRITE: str = "rewrite"
WRITE_MODE_APPEND_DELTA: str = "appendDelta"
VALID_WRITE_MODES: frozenset[str] = frozenset({WRITE_MODE_REWRITE, WRITE_MODE_APPEND_DELTA})

DEFAULT_CSS_FORMAT: str = CSS_FORMAT_MULTILINE
DEFAULT_BASE_UNIT: str = "px"
DEFAULT_UNIT_CONVERSION: float = 1.0

DEFAULT_FILE_TYPES: tuple[str, ...] = ("html", "wxml", "vue")
DEFAULT_CLASS_ATTRIBUTES: tuple[str, ...] = ("class",)

DEFAULT_OUTPUT_FILE_NAME: str = "index.css"
DEFAULT_OUTPUT_FILE_TYPE: str = "css"

DEFAULT_IMPORTANT_PREFIXES: tuple[str, ...] = ("!",)

DEFAULT_BREAKPOINTS: dict[str, str] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

DEFAULT_STATES: dict[str, str] = {
    "hover": "hover",
    "focus": "focus",
    "active": "active",
    "disabled": "disabled",
    "first": "first-child",
    "last": "last-child",
    "odd": "nth-child(odd)",
    "even": "nth-child(even)",
}

DEFAULT_DEBOUNCE_MS: int = 300
DEFAULT_SETTLE_MS: int = 50
DEFAULT_LOCK_TIMEOUT_MS: int = 1000
DEFAULT_POLL_INTERVAL_MS: int = 500
MIN_DEBOUNCE_MS: int = 0
MAX_DEBOUNCE_MS: int = 5000
