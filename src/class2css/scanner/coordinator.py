"""Merged token state across all watched markup files."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from class2css.config.model import Class2CssConfig
from class2css.exceptions import CoordinationError, MarkupParseError
from class2css.io import read_markup
from class2css.model import ClassToken, Diagnostic, FileEvent, MergedScanState, ScanReport
from class2css.parsers import TokenClassifier
from class2css.reporting.notifier import Notifier
from class2css.scanner.discovery import discover_markup_files, is_markup_file
from class2css.types import ScanPhase

logger = logging.getLogger(__name__)


class ScanCoordinator:
    """Single writer of the merged scan state.

    Phases move ``idle -> scanning -> settling -> locked``. Only one full scan
    may be in flight; a second request while scanning is rejected and
    reported, never queued. File events arriving mid-scan are held back and
    absorbed during the settle window, so ``locked`` always means the union
    reflects every file seen so far.
    """

    def __init__(
        self,
        config: Class2CssConfig,
        classifier: TokenClassifier | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._config = config
        self._classifier = classifier or TokenClassifier(config)
        self._notifier = notifier or Notifier()
        self._phase: ScanPhase = "idle"
        self._tokens_by_file: dict[Path, tuple[ClassToken, ...]] = {}
        self._union: dict[str, ClassToken] = {}
        self._refcounts: dict[str, int] = {}
        self._deferred: list[FileEvent] = []
        self._inflight = 0
        self._locked = asyncio.Event()
        self._last_scan_at: float | None = None

    @property
    def phase(self) -> ScanPhase:
        return self._phase

    @property
    def is_locked(self) -> bool:
        return self._phase == "locked" and self._inflight == 0 and not self._deferred

    @property
    def file_count(self) -> int:
        return len(self._tokens_by_file)

    @property
    def token_count(self) -> int:
        return len(self._union)

    @property
    def union_tokens(self) -> tuple[ClassToken, ...]:
        return tuple(self._union.values())

    @property
    def last_scan_at(self) -> float | None:
        return self._last_scan_at

    def snapshot(self) -> MergedScanState:
        return MergedScanState(
            tokens_by_file=dict(self._tokens_by_file),
            union_tokens=self.union_tokens,
            is_locked=self.is_locked,
            last_scan_at=self._last_scan_at,
        )

    async def full_scan(self) -> ScanReport | None:
        """Walk every entry path and rebuild the merged state.

        Returns None when the request was rejected because a scan is already
        running.
        """
        try:
            self._begin_scan()
        except CoordinationError as exc:
            self._notifier.report(Diagnostic(code="coordination_error", message=str(exc)))
            self._notifier.emit("scan.rejected")
            return None

        started = time.monotonic()
        failed: list[str] = []
        try:
            self._notifier.emit("scan.started")
            files, missing = discover_markup_files(
                self._config.entry_paths, self._config.entry.file_types, root=self._config.root
            )
            for entry in missing:
                self._notifier.report(
                    Diagnostic(code="missing_entry", message="entry path does not exist", path=str(entry))
                )

            scanned: dict[Path, tuple[ClassToken, ...]] = {}
            for path in files:
                tokens = await self._scan_file(path)
                if tokens is None:
                    failed.append(str(path))
                else:
                    scanned[path] = tokens
                    self._notifier.emit("scan.file", path=str(path), token_count=len(tokens))
                await asyncio.sleep(0)

            self._tokens_by_file = {}
            self._union.clear()
            self._refcounts.clear()
            for path, tokens in scanned.items():
                self._replace(path, tokens)

            self._phase = "settling"
            await self._settle()
        except BaseException:
            self._phase = "idle"
            self._deferred.clear()
            raise

        self._phase = "locked"
        self._last_scan_at = time.time()
        self._refresh_lock()
        report = ScanReport(
            file_count=len(self._tokens_by_file),
            token_count=len(self._union),
            failed_files=tuple(failed),
            duration_seconds=time.monotonic() - started,
        )
        logger.info("Scanned %d file(s), %d unique token(s)", report.file_count, report.token_count)
        self._notifier.emit("scan.completed", report=report)
        return report

    async def apply_event(self, event: FileEvent) -> bool:
        """Apply one file event; returns False when it was deferred until the scan ends."""
        if self._phase == "scanning":
            self._deferred.append(event)
            self._locked.clear()
            return False
        await self._apply(event)
        return True

    def update_file(self, path: Path, markup: str) -> tuple[ClassToken, ...]:
        """Reclassify *path* from in-memory *markup* and merge the result.

        Raises:
            MarkupParseError: the markup cannot be scanned; state is unchanged.
        """
        resolved = path.resolve()
        tokens = self._classify(resolved, markup)
        self._replace(resolved, tokens)
        return tokens

    def remove_file(self, path: Path) -> bool:
        resolved = path.resolve()
        if resolved not in self._tokens_by_file:
            return False
        self._replace(resolved, None)
        return True

    async def wait_until_locked(self, timeout: float) -> bool:
        """Wait up to *timeout* seconds for a consistent snapshot."""
        if self.is_locked:
            return True
        try:
            await asyncio.wait_for(self._locked.wait(), timeout=timeout)
        except TimeoutError:
            return False
        return True

    def _begin_scan(self) -> None:
        if self._phase == "scanning":
            raise CoordinationError("full scan already in progress; request rejected")
        self._phase = "scanning"
        self._locked.clear()

    async def _settle(self) -> None:
        while True:
            while self._deferred:
                await self._apply(self._deferred.pop(0))
            await asyncio.sleep(self._config.watch.settle_ms / 1000)
            if not self._deferred:
                return

    async def _apply(self, event: FileEvent) -> None:
        path = event.path.resolve()
        if event.type == "unlink" and not path.exists():
            self.remove_file(path)
            return
        if not is_markup_file(path, self._config.entry.file_types):
            return

        self._inflight += 1
        self._locked.clear()
        try:
            tokens = await self._scan_file(path)
            if tokens is not None:
                self._replace(path, tokens)
            elif not path.exists():
                self.remove_file(path)
        finally:
            self._inflight -= 1
            self._refresh_lock()

    async def _scan_file(self, path: Path) -> tuple[ClassToken, ...] | None:
        try:
            markup = await read_markup(path)
            return self._classify(path, markup)
        except FileNotFoundError:
            logger.debug("File vanished before it could be read: %s", path)
            return None
        except (MarkupParseError, OSError) as exc:
            self._notifier.report(Diagnostic(code="parse_error", message=str(exc), path=str(path)))
            return None

    def _classify(self, path: Path, markup: str) -> tuple[ClassToken, ...]:
        result = self._classifier.classify(markup)
        if result.discarded:
            self._notifier.report(
                Diagnostic(
                    code="unknown_token",
                    message=f"unrecognized class token(s): {', '.join(result.discarded)}",
                    path=str(path),
                )
            )
        return result.tokens

    def _replace(self, path: Path, tokens: tuple[ClassToken, ...] | None) -> None:
        for token in self._tokens_by_file.pop(path, ()):
            key = token.identity
            remaining = self._refcounts.get(key, 0) - 1
            if remaining > 0:
                self._refcounts[key] = remaining
            else:
                self._refcounts.pop(key, None)
                self._union.pop(key, None)

        if tokens is None:
            return
        self._tokens_by_file[path] = tokens
        for token in tokens:
            key = token.identity
            self._refcounts[key] = self._refcounts.get(key, 0) + 1
            self._union.setdefault(key, token)

    def _refresh_lock(self) -> None:
        if self.is_locked:
            self._locked.set()
