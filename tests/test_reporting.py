"""Tests for the notification channel and status rendering."""

from __future__ import annotations

from class2css.model import BuildResult, CacheStats, Diagnostic, StatusSnapshot
from class2css.reporting import Notification, Notifier, StatusReporter


def test_subscribers_receive_events_until_unsubscribed() -> None:
    notifier = Notifier()
    seen: list[Notification] = []
    unsubscribe = notifier.subscribe(seen.append)

    notifier.emit("scan.started")
    unsubscribe()
    notifier.emit("scan.completed")

    assert [event.kind for event in seen] == ["scan.started"]


def test_failing_subscriber_does_not_block_others() -> None:
    notifier = Notifier()
    seen: list[str] = []

    def broken(_: Notification) -> None:
        raise RuntimeError("boom")

    notifier.subscribe(broken)
    notifier.subscribe(lambda event: seen.append(event.kind))

    notifier.emit("build.started")

    assert seen == ["build.started"]


def test_report_records_and_publishes_diagnostic() -> None:
    notifier = Notifier()
    seen: list[Notification] = []
    notifier.subscribe(seen.append)
    diagnostic = Diagnostic(code="write_error", message="disk full", path="out.css")

    notifier.report(diagnostic)

    assert notifier.recent_diagnostics == (diagnostic,)
    assert seen[0].data["diagnostic"] is diagnostic
    assert diagnostic.format() == "[write_error] out.css disk full"


def test_status_reporter_renders_snapshot() -> None:
    snapshot = StatusSnapshot(
        phase="locked",
        is_locked=True,
        file_count=2,
        token_count=5,
        last_scan_at=None,
        pending_writes=0,
        last_build_at=None,
        cache=CacheStats(hot_size=3, warm_size=5, hits=1, misses=3, evictions=0, expirations=0),
        diagnostics=(Diagnostic(code="resolution_error", message="unknown prefix", token="zz-1"),),
    )
    build = BuildResult(full=True, targets_written=("index.css",), rule_count=4)

    text = StatusReporter(snapshot, build=build).render()

    assert "Phase       locked" in text
    assert "Locked      yes" in text
    assert "Cache       3 hot / 5 warm, 1 hits / 3 misses (25%)" in text
    assert "Wrote       index.css" in text
    assert "[resolution_error] 'zz-1' unknown prefix" in text
