"""Notifier adapters."""

from .notifiers import (
    LoggingNotifier,
    NullNotifier,
)

__all__ = [
    "LoggingNotifier",
    "NullNotifier",
]
