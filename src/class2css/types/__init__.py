"""Shared type aliases for class2css."""

from .common import CssFormat, DiagnosticCode, FileEventType, OutputMode, ScanPhase, Section, WriteMode
from .config import CacheConfig, EntryConfig, ImportantFlags, OutputConfig, SystemConfig, WatchConfig

__all__ = [
    "CacheConfig",
    "CssFormat",
    "DiagnosticCode",
    "EntryConfig",
    "FileEventType",
    "ImportantFlags",
    "OutputConfig",
    "OutputMode",
    "ScanPhase",
    "Section",
    "SystemConfig",
    "WatchConfig",
    "WriteMode",
]
