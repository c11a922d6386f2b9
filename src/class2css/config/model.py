"""Config data model for class2css builds."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from class2css.constants.config import DEFAULT_BREAKPOINTS, DEFAULT_STATES
from class2css.model.rules import LiteralDeclaration, PropertyMapping, SingleProperty
from class2css.types.config import (
    CacheConfig,
    EntryConfig,
    ImportantFlags,
    OutputConfig,
    SystemConfig,
    WatchConfig,
)


@dataclass(frozen=True)
class Class2CssConfig:
    """Resolved build config."""

    root: Path = Path(".")
    source_path: Path | None = None
    system: SystemConfig = SystemConfig()
    important: ImportantFlags = ImportantFlags()
    rules: dict[str, PropertyMapping] = field(default_factory=dict)
    color_families: dict[str, SingleProperty] = field(default_factory=dict)
    colors: dict[str, str] = field(default_factory=dict)
    static_classes: dict[str, LiteralDeclaration] = field(default_factory=dict)
    breakpoints: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_BREAKPOINTS))
    states: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_STATES))
    entry: EntryConfig = EntryConfig()
    output: OutputConfig = OutputConfig()
    watch: WatchConfig = WatchConfig()
    cache: CacheConfig = CacheConfig()

    @property
    def entry_paths(self) -> tuple[Path, ...]:
        """Scan entries, defaulting to the config root."""
        return self.entry.paths or (self.root,)

    @property
    def unified_output_path(self) -> Path:
        """Target file for ``uniFile`` mode."""
        return (self.output.path or self.root) / self.output.file_name
