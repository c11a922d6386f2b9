"""Plain-text rendering of build status snapshots."""

from __future__ import annotations

from datetime import datetime

from class2css.constants.branding import STATUS_SUMMARY_TITLE
from class2css.constants.reporting import ANSI_RED, ANSI_RESET, PHASE_COLORS, STATUS_DIAGNOSTIC_LIMIT
from class2css.model import BuildResult, StatusSnapshot


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def _format_time(timestamp: float | None) -> str:
    if timestamp is None:
        return "never"
    return datetime.fromtimestamp(timestamp).strftime("%H:%M:%S")


class StatusReporter:
    """Formats a status snapshot (and optionally the last build) for stdout."""

    def __init__(self, snapshot: StatusSnapshot, *, build: BuildResult | None = None, color: bool = False) -> None:
        self._snapshot = snapshot
        self._build = build
        self._color = color

    def render(self) -> str:
        s = self._snapshot
        sep = "  " + "─" * 38
        phase = _colorize(s.phase, PHASE_COLORS.get(s.phase, "")) if self._color else s.phase
        cache = s.cache

        lines = [
            "",
            f"  {STATUS_SUMMARY_TITLE}",
            sep,
            f"  Phase       {phase}",
            f"  Locked      {'yes' if s.is_locked else 'no'}",
            f"  Files       {s.file_count}",
            f"  Tokens      {s.token_count}",
            f"  Last scan   {_format_time(s.last_scan_at)}",
            f"  Last build  {_format_time(s.last_build_at)}",
            f"  Pending     {s.pending_writes}",
            (
                f"  Cache       {cache.hot_size} hot / {cache.warm_size} warm, "
                f"{cache.hits} hits / {cache.misses} misses ({cache.hit_rate:.0%})"
            ),
        ]
        if self._build is not None:
            lines.extend(self._render_build(self._build))
        lines.extend(self._render_diagnostics())
        lines.append("")
        return "\n".join(lines)

    def _render_build(self, build: BuildResult) -> list[str]:
        if build.skipped:
            return ["  Build       nothing to write"]
        kind = "full" if build.full else "incremental"
        lines = [f"  Build       {kind}, {build.rule_count} rule(s)"]
        for target in build.targets_written:
            lines.append(f"  Wrote       {target}")
        for target in build.targets_removed:
            lines.append(f"  Removed     {target}")
        for target in build.targets_failed:
            failed = _colorize(target, ANSI_RED) if self._color else target
            lines.append(f"  Failed      {failed}")
        return lines

    def _render_diagnostics(self) -> list[str]:
        diagnostics = self._snapshot.diagnostics
        if not diagnostics:
            return []
        lines = [f"  Warnings    {len(diagnostics)}"]
        for diagnostic in diagnostics[-STATUS_DIAGNOSTIC_LIMIT:]:
            lines.append(f"    {diagnostic.format()}")
        return lines
