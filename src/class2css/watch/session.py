"""Long-running build session: wiring, event loop and config hot reload."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from class2css.cache import ResultCache
from class2css.config import Class2CssConfig, config_fingerprint, load_config
from class2css.constants.config import CONFIG_FILENAME
from class2css.engine import RuleResolver
from class2css.exceptions import ConfigError
from class2css.model import BuildResult, Diagnostic, FileEvent, StatusSnapshot
from class2css.output import BuildWriter, CssGenerator, OutputSink
from class2css.parsers import TokenClassifier
from class2css.reporting import Notifier
from class2css.scanner import ScanCoordinator
from class2css.watch.poller import PollingWatcher

logger = logging.getLogger(__name__)


class WatchSession:
    """Owns one set of components built from one configuration.

    Components are rebuilt (and the result cache cleared) whenever the config
    file's fingerprint changes; an invalid new config is reported and the
    previous one stays active.
    """

    def __init__(
        self,
        config: Class2CssConfig,
        *,
        config_path: Path | None = None,
        notifier: Notifier | None = None,
        sink: OutputSink | None = None,
    ) -> None:
        self._notifier = notifier or Notifier()
        self._sink = sink
        self._config_path = config_path or config.source_path
        self._watched_config = self._config_path or config.root / CONFIG_FILENAME
        self._cache = ResultCache(config.cache)
        self._config_signature = self._stat_config()
        self._build(config)

    @property
    def config(self) -> Class2CssConfig:
        return self._config

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def coordinator(self) -> ScanCoordinator:
        return self._coordinator

    @property
    def writer(self) -> BuildWriter:
        return self._writer

    @property
    def cache(self) -> ResultCache:
        return self._cache

    async def start(self) -> BuildResult | None:
        """Cold start: full scan, then a full build."""
        return await self.rescan()

    async def rescan(self) -> BuildResult | None:
        """Full rescan followed by a forced full rebuild; None if the scan was rejected."""
        report = await self._coordinator.full_scan()
        if report is None:
            return None
        return await self._writer.flush_now(full=True)

    async def flush_now(self, *, full: bool = False) -> BuildResult:
        return await self._writer.flush_now(full=full)

    async def handle_event(self, event: FileEvent) -> None:
        """Merge one file event, then let the writer debounce the build."""
        await self._coordinator.apply_event(event)
        self._writer.on_file_event(event)

    async def reload_config(self) -> bool:
        """Reload the config file; returns True when a new config was applied."""
        try:
            config = load_config(self._config.root, self._config_path)
        except ConfigError as exc:
            self._notifier.report(Diagnostic(code="config_error", message=str(exc), path=str(self._config_path or "")))
            return False
        if config_fingerprint(config) == self._fingerprint:
            return False

        logger.info("Configuration changed; rebuilding from scratch")
        await self._writer.wait_idle()
        self._writer.close()
        self._cache.invalidate_all()
        self._cache = ResultCache(config.cache)
        self._build(config)
        await self.rescan()
        return True

    def sweep_cache(self) -> int:
        return self._cache.evict_expired()

    def status(self) -> StatusSnapshot:
        return StatusSnapshot(
            phase=self._coordinator.phase,
            is_locked=self._coordinator.is_locked,
            file_count=self._coordinator.file_count,
            token_count=self._coordinator.token_count,
            last_scan_at=self._coordinator.last_scan_at,
            pending_writes=self._writer.pending_writes,
            last_build_at=self._writer.last_build_at,
            cache=self._cache.stats(),
            diagnostics=self._notifier.recent_diagnostics,
        )

    async def run(self, stop: asyncio.Event | None = None) -> None:
        """Start, then poll for changes until *stop* is set."""
        stop = stop or asyncio.Event()
        await self.start()
        next_sweep = time.monotonic() + self._config.cache.sweep_interval_seconds
        logger.info("Watching %s", ", ".join(str(path) for path in self._config.entry_paths))

        try:
            while not stop.is_set():
                for event in self._watcher.poll():
                    await self.handle_event(event)
                if self._config_changed_on_disk():
                    await self.reload_config()
                if time.monotonic() >= next_sweep:
                    self.sweep_cache()
                    next_sweep = time.monotonic() + self._config.cache.sweep_interval_seconds
                try:
                    await asyncio.wait_for(stop.wait(), timeout=self._config.watch.poll_interval_ms / 1000)
                except TimeoutError:
                    pass
        finally:
            await self._writer.wait_idle()
            self._writer.close()

    def _build(self, config: Class2CssConfig) -> None:
        self._config = config
        self._fingerprint = config_fingerprint(config)
        classifier = TokenClassifier(config)
        resolver = RuleResolver(config, self._notifier)
        self._coordinator = ScanCoordinator(config, classifier, self._notifier)
        generator = CssGenerator(config, resolver, self._cache)
        self._writer = BuildWriter(config, self._coordinator, generator, self._notifier, sink=self._sink)
        self._watcher = PollingWatcher(config.entry_paths, config.entry.file_types, root=config.root)
        # Prime the baseline so the cold scan's files are not replayed as "add".
        self._watcher.poll()

    def _stat_config(self) -> tuple[int, int] | None:
        try:
            stat = self._watched_config.stat()
        except OSError:
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def _config_changed_on_disk(self) -> bool:
        signature = self._stat_config()
        if signature == self._config_signature:
            return False
        self._config_signature = signature
        return True
