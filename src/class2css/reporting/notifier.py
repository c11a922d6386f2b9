"""Notification channel for external observers (CLI, tests, editors)."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from class2css.model import Diagnostic

logger = logging.getLogger(__name__)

_RECENT_DIAGNOSTICS_LIMIT = 200


@dataclass(frozen=True)
class Notification:
    """One published event."""

    kind: str
    data: dict[str, Any] = field(default_factory=dict)


type Subscriber = Callable[[Notification], None]


class Notifier:
    """Fan-out of build progress events and diagnostics to subscribers.

    Only used at the boundary to external observers; components call each
    other directly.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []
        self._recent: deque[Diagnostic] = deque(maxlen=_RECENT_DIAGNOSTICS_LIMIT)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback*; the returned function unsubscribes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    def emit(self, kind: str, **data: Any) -> None:
        notification = Notification(kind=kind, data=data)
        logger.debug("%s %s", kind, data)
        for callback in list(self._subscribers):
            try:
                callback(notification)
            except Exception:
                logger.exception("Subscriber failed while handling %s", kind)

    def report(self, diagnostic: Diagnostic) -> None:
        """Log a diagnostic at WARNING and publish it."""
        self._recent.append(diagnostic)
        logger.warning(diagnostic.format())
        self.emit("diagnostic", diagnostic=diagnostic)

    @property
    def recent_diagnostics(self) -> tuple[Diagnostic, ...]:
        return tuple(self._recent)
