"""Watch mode: polling watcher and long-running session."""

from .poller import PollingWatcher
from .session import WatchSession

__all__ = ["PollingWatcher", "WatchSession"]
