"""Core data models for class2css."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from class2css.constants.cache import CACHE_KEY_SEPARATOR
from class2css.types import DiagnosticCode, FileEventType


@dataclass(frozen=True, slots=True)
class ClassToken:
    """One class token as written in markup, after modifier stripping.

    ``clean`` is the token without its importance marker but with its variant
    prefixes, ``base`` is what remains after the breakpoint and pseudo-state
    prefixes are peeled off.
    """

    raw: str
    clean: str
    base: str
    is_important: bool = False
    pseudo_state: str | None = None
    breakpoint: str | None = None
    is_static: bool = False

    @property
    def identity(self) -> str:
        """Cache and dedup key for this token."""
        return CACHE_KEY_SEPARATOR.join(
            (
                self.clean,
                self.pseudo_state or "",
                self.breakpoint or "",
                "1" if self.is_important else "0",
            )
        )


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Tokens found in one markup fragment, split by kind."""

    static_tokens: tuple[ClassToken, ...] = ()
    dynamic_tokens: tuple[ClassToken, ...] = ()
    discarded: tuple[str, ...] = ()

    @property
    def tokens(self) -> tuple[ClassToken, ...]:
        return self.static_tokens + self.dynamic_tokens


@dataclass(frozen=True, slots=True)
class ResolvedDeclaration:
    """A single ``selector { property: value }`` triple."""

    selector: str
    css_property: str
    css_value: str


@dataclass(frozen=True, slots=True)
class FileEvent:
    """A file-system change notification."""

    type: FileEventType
    path: Path


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A non-fatal problem reported while scanning, resolving, or writing."""

    code: DiagnosticCode
    message: str
    path: str = ""
    token: str = ""

    def format(self) -> str:
        """Format as a human-readable single-line message."""
        parts = [f"[{self.code}]"]
        if self.path:
            parts.append(self.path)
        if self.token:
            parts.append(f"'{self.token}'")
        parts.append(self.message)
        return " ".join(parts)


@dataclass(frozen=True)
class MergedScanState:
    """Read-only snapshot of the merged token set."""

    tokens_by_file: dict[Path, tuple[ClassToken, ...]]
    union_tokens: tuple[ClassToken, ...]
    is_locked: bool
    last_scan_at: float | None

    def tokens_for(self, path: Path) -> tuple[ClassToken, ...]:
        return self.tokens_by_file.get(path, ())


@dataclass(frozen=True)
class ScanReport:
    """Outcome of one completed full scan."""

    file_count: int
    token_count: int
    failed_files: tuple[str, ...] = ()
    duration_seconds: float = 0.0


@dataclass(frozen=True)
class CacheStats:
    """Counters exposed by the result cache."""

    hot_size: int
    warm_size: int
    hits: int
    misses: int
    evictions: int
    expirations: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return (self.hits / total) if total else 0.0


@dataclass(frozen=True)
class BuildResult:
    """Outcome of one build cycle."""

    full: bool
    targets_written: tuple[str, ...] = ()
    targets_failed: tuple[str, ...] = ()
    targets_removed: tuple[str, ...] = ()
    rule_count: int = 0
    skipped: bool = False


@dataclass(frozen=True)
class StatusSnapshot:
    """Point-in-time view for external reporting."""

    phase: str
    is_locked: bool
    file_count: int
    token_count: int
    last_scan_at: float | None
    pending_writes: int
    last_build_at: float | None
    cache: CacheStats
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)
