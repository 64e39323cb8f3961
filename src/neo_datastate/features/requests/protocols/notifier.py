"""Protocols for the collaborators a request executor is wired with."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Notifier(Protocol):
    """Fire-and-forget user notification surface."""

    def success(self, message: str) -> None:
        """Report a successful outcome."""
        ...

    def error(self, message: str) -> None:
        """Report a failed outcome."""
        ...

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...


@runtime_checkable
class ErrorClassifier(Protocol):
    """Maps a raw failure to a single display string."""

    def __call__(self, error: Any) -> str:
        ...
