"""Protocols for request executor collaborators."""

from .notifier import (
    Notifier,
    ErrorClassifier,
)

__all__ = [
    "Notifier",
    "ErrorClassifier",
]
