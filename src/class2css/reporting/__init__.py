"""Notification channel and status reporting."""

from .notifier import Notification, Notifier, Subscriber
from .status import StatusReporter

__all__ = ["Notification", "Notifier", "StatusReporter", "Subscriber"]
