"""Typed configuration structures for class2css build settings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from class2css.constants.cache import (
    DEFAULT_HOT_CAPACITY,
    DEFAULT_HOT_TTL_SECONDS,
    DEFAULT_SWEEP_INTERVAL_SECONDS,
    DEFAULT_WARM_CAPACITY,
    DEFAULT_WARM_TTL_SECONDS,
)
from class2css.constants.config import (
    DEFAULT_BASE_UNIT,
    DEFAULT_CLASS_ATTRIBUTES,
    DEFAULT_CSS_FORMAT,
    DEFAULT_DEBOUNCE_MS,
    DEFAULT_FILE_TYPES,
    DEFAULT_IMPORTANT_PREFIXES,
    DEFAULT_LOCK_TIMEOUT_MS,
    DEFAULT_OUTPUT_FILE_NAME,
    DEFAULT_OUTPUT_FILE_TYPE,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_SETTLE_MS,
    DEFAULT_UNIT_CONVERSION,
    OUTPUT_MODE_UNIFILE,
    WRITE_MODE_REWRITE,
)
from class2css.types.common import CssFormat, OutputMode, WriteMode


@dataclass(frozen=True)
class SystemConfig:
    """Unit handling and formatting switches."""

    css_format: CssFormat = DEFAULT_CSS_FORMAT  # type: ignore[assignment]
    base_unit: str = DEFAULT_BASE_UNIT
    unit_conversion: float = DEFAULT_UNIT_CONVERSION
    property_units: dict[str, str] = field(default_factory=dict)
    property_conversion: dict[str, float] = field(default_factory=dict)
    sort_classes: bool = False
    common_css_path: Path | None = None
    common_css: str = ""


@dataclass(frozen=True)
class ImportantFlags:
    """Markers that flag a class token as ``!important``."""

    prefixes: tuple[str, ...] = DEFAULT_IMPORTANT_PREFIXES
    suffixes: tuple[str, ...] = ()
    custom: tuple[str, ...] = ()


@dataclass(frozen=True)
class EntryConfig:
    """Which files are scanned and which attributes carry classes."""

    paths: tuple[Path, ...] = ()
    file_types: tuple[str, ...] = DEFAULT_FILE_TYPES
    class_attributes: tuple[str, ...] = DEFAULT_CLASS_ATTRIBUTES


@dataclass(frozen=True)
class OutputConfig:
    """Output topology selection."""

    mode: OutputMode = OUTPUT_MODE_UNIFILE  # type: ignore[assignment]
    path: Path | None = None
    file_name: str = DEFAULT_OUTPUT_FILE_NAME
    file_type: str = DEFAULT_OUTPUT_FILE_TYPE
    write_mode: WriteMode = WRITE_MODE_REWRITE  # type: ignore[assignment]


@dataclass(frozen=True)
class WatchConfig:
    """Timing windows for the watch loop, in milliseconds."""

    debounce_ms: int = DEFAULT_DEBOUNCE_MS
    settle_ms: int = DEFAULT_SETTLE_MS
    lock_timeout_ms: int = DEFAULT_LOCK_TIMEOUT_MS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS


@dataclass(frozen=True)
class CacheConfig:
    """Result cache tier sizing."""

    hot_capacity: int = DEFAULT_HOT_CAPACITY
    hot_ttl_seconds: float = DEFAULT_HOT_TTL_SECONDS
    warm_capacity: int = DEFAULT_WARM_CAPACITY
    warm_ttl_seconds: float = DEFAULT_WARM_TTL_SECONDS
    sweep_interval_seconds: float = DEFAULT_SWEEP_INTERVAL_SECONDS
