"""Debounced persistence of generated CSS."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from class2css.config.model import Class2CssConfig
from class2css.constants.css import DELTA_BASE_MARKER, DELTA_START_MARKER
from class2css.exceptions import WriteError
from class2css.model import BuildResult, Diagnostic, FileEvent
from class2css.output.generator import CssGenerator
from class2css.output.sink import FileSystemSink, OutputSink
from class2css.reporting.notifier import Notifier
from class2css.scanner import ScanCoordinator

logger = logging.getLogger(__name__)


class BuildWriter:
    """Turns the merged token set into CSS files.

    Every :meth:`on_file_event` restarts one shared debounce timer; a build
    only runs once events stop arriving for the debounce window. Builds are
    serialized and never cancelled, so events that land mid-build show up in
    the following flush.
    """

    def __init__(
        self,
        config: Class2CssConfig,
        coordinator: ScanCoordinator,
        generator: CssGenerator,
        notifier: Notifier | None = None,
        *,
        sink: OutputSink | None = None,
    ) -> None:
        self._config = config
        self._coordinator = coordinator
        self._generator = generator
        self._notifier = notifier or Notifier()
        self._sink = sink or FileSystemSink()
        self._debounce_seconds = config.watch.debounce_ms / 1000
        self._timer: asyncio.TimerHandle | None = None
        self._build_lock = asyncio.Lock()
        self._tasks: set[asyncio.Task[BuildResult]] = set()
        self._dirty: set[Path] = set()
        self._removed: set[Path] = set()
        self._pending_events = 0
        self._emitted: dict[str, None] = {}
        self._needs_full = True
        self._first_run = True
        self._last_build_at: float | None = None

    @property
    def pending_writes(self) -> int:
        return self._pending_events

    @property
    def last_build_at(self) -> float | None:
        return self._last_build_at

    def on_file_event(self, event: FileEvent) -> None:
        """Record a source change and (re)start the debounce timer."""
        path = event.path.resolve()
        if event.type == "unlink" and not path.exists():
            self._dirty.discard(path)
            self._removed.add(path)
        else:
            self._removed.discard(path)
            self._dirty.add(path)
        self._pending_events += 1
        self._schedule()

    def request_full_build(self) -> None:
        """Schedule a debounced build that rewrites every target from scratch."""
        self._needs_full = True
        self._schedule()

    async def flush_now(self, *, full: bool = False) -> BuildResult:
        """Build immediately, absorbing any pending debounced events."""
        self._cancel_timer()
        return await self._flush(full=full)

    async def wait_idle(self) -> None:
        """Wait until no debounce timer is pending and no build is running."""
        loop = asyncio.get_running_loop()
        while self._timer is not None or self._tasks:
            if self._timer is not None:
                await asyncio.sleep(max(0.0, self._timer.when() - loop.time()))
                await asyncio.sleep(0)
            if self._tasks:
                await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        self._cancel_timer()

    def _schedule(self) -> None:
        self._cancel_timer()
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._debounce_seconds, self._fire)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _fire(self) -> None:
        self._timer = None
        task = asyncio.get_running_loop().create_task(self._flush(full=False))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _flush(self, *, full: bool) -> BuildResult:
        async with self._build_lock:
            if self._first_run:
                await self._wait_for_lock()
            full = full or self._needs_full
            self._needs_full = False
            dirty, self._dirty = self._dirty, set()
            removed, self._removed = self._removed, set()
            self._pending_events = 0

            self._notifier.emit("build.started", full=full)
            if self._config.output.mode == "separate":
                result = self._build_separate(full=full, dirty=dirty, removed=removed)
            else:
                result = self._build_unified(full=full)

            self._first_run = False
            if result.full and result.targets_failed:
                self._needs_full = True
            self._last_build_at = time.time()
            self._notifier.emit("build.completed", result=result)
            return result

    async def _wait_for_lock(self) -> None:
        timeout = self._config.watch.lock_timeout_ms / 1000
        if await self._coordinator.wait_until_locked(timeout):
            return
        self._notifier.report(
            Diagnostic(
                code="lock_timeout",
                message=f"scan did not settle within {timeout:g}s; building from partial data",
            )
        )

    def _build_unified(self, *, full: bool) -> BuildResult:
        target = self._config.unified_output_path
        tokens = self._coordinator.union_tokens
        if self._config.output.write_mode != "appendDelta":
            generated = self._generator.generate(tokens)
            content = f"{generated.text}\n" if generated.text else ""
            return self._write(target, content, full=full, rule_count=generated.rule_count)

        if not full:
            try:
                existing = self._sink.read_text(target)
            except OSError as exc:
                self._report_write_error(target, exc)
                self._needs_full = True
                return BuildResult(full=False, targets_failed=(str(target),))
            if existing is None or DELTA_BASE_MARKER not in existing or DELTA_START_MARKER not in existing:
                logger.info("Delta markers missing in %s; rewriting it in full", target)
                full = True

        if full:
            generated = self._generator.generate(tokens)
            body = f"{generated.text}\n" if generated.text else ""
            content = f"{DELTA_BASE_MARKER}\n{body}{DELTA_START_MARKER}\n"
            result = self._write(target, content, full=True, rule_count=generated.rule_count)
            if not result.targets_failed:
                self._emitted = dict.fromkeys(token.identity for token in tokens)
            return result

        fresh = [token for token in tokens if token.identity not in self._emitted]
        if not fresh:
            return BuildResult(full=False, skipped=True)
        generated = self._generator.generate(fresh, include_common=False)
        result = self._append(target, generated.text, rule_count=generated.rule_count)
        if not result.targets_failed:
            self._emitted.update(dict.fromkeys(token.identity for token in fresh))
        return result

    def _build_separate(self, *, full: bool, dirty: set[Path], removed: set[Path]) -> BuildResult:
        state = self._coordinator.snapshot()
        sources = list(state.tokens_by_file) if full else sorted(path for path in dirty if path in state.tokens_by_file)

        written: list[str] = []
        failed: list[str] = []
        deleted: list[str] = []
        rule_count = 0
        for source in sorted(removed):
            if source in state.tokens_by_file:
                continue
            target = mirrored_output_path(self._config, source)
            try:
                if self._sink.remove(target):
                    deleted.append(str(target))
            except OSError as exc:
                self._report_write_error(target, exc)
                failed.append(str(target))

        for source in sources:
            target = mirrored_output_path(self._config, source)
            generated = self._generator.generate(state.tokens_for(source))
            content = f"{generated.text}\n" if generated.text else ""
            try:
                self._sink.write_text(target, content)
            except OSError as exc:
                self._report_write_error(target, exc)
                failed.append(str(target))
                continue
            written.append(str(target))
            rule_count += generated.rule_count
            self._notifier.emit("write.completed", path=str(target), rules=generated.rule_count)

        return BuildResult(
            full=full,
            targets_written=tuple(written),
            targets_failed=tuple(failed),
            targets_removed=tuple(deleted),
            rule_count=rule_count,
        )

    def _write(self, target: Path, content: str, *, full: bool, rule_count: int) -> BuildResult:
        try:
            self._sink.write_text(target, content)
        except OSError as exc:
            self._report_write_error(target, exc)
            return BuildResult(full=full, targets_failed=(str(target),))
        self._notifier.emit("write.completed", path=str(target), rules=rule_count)
        return BuildResult(full=full, targets_written=(str(target),), rule_count=rule_count)

    def _append(self, target: Path, text: str, *, rule_count: int) -> BuildResult:
        if not text:
            return BuildResult(full=False, skipped=True)
        try:
            self._sink.append_text(target, f"{text}\n")
        except OSError as exc:
            self._report_write_error(target, exc)
            return BuildResult(full=False, targets_failed=(str(target),))
        self._notifier.emit("write.completed", path=str(target), rules=rule_count, delta=True)
        return BuildResult(full=False, targets_written=(str(target),), rule_count=rule_count)

    def _report_write_error(self, target: Path, exc: OSError) -> None:
        error = WriteError(target, exc)
        self._notifier.report(Diagnostic(code="write_error", message=str(error), path=str(target)))


def mirrored_output_path(config: Class2CssConfig, source: Path) -> Path:
    """Per-file output path: the source's path relative to the root, re-rooted and re-suffixed."""
    suffix = f".{config.output.file_type.lstrip('.')}"
    root = config.root.resolve()
    try:
        relative = source.resolve().relative_to(root)
    except ValueError:
        relative = Path(source.name)
    base = config.output.path if config.output.path is not None else root
    return (base / relative).with_suffix(suffix)

