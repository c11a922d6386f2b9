"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type CssFormat = Literal["multiline", "singleline", "compressed"]
type OutputMode = Literal["separate", "uniFile"]
type WriteMode = Literal["rewrite", "appendDelta"]
type FileEventType = Literal["add", "change", "unlink"]
type Section = Literal["dynamic", "static", "fallback"]
type ScanPhase = Literal["idle", "scanning", "settling", "locked"]
type DiagnosticCode = Literal[
    "parse_error",
    "unknown_token",
    "resolution_error",
    "coordination_error",
    "write_error",
    "lock_timeout",
    "missing_entry",
    "config_error",
]
