"""Pytest configuration and fixtures for neo-datastate tests."""

import asyncio
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

import pytest

from neo_datastate.config.settings import DataStateSettings


class RecordingNotifier:
    """Notifier that keeps every notification it receives."""

    def __init__(self):
        self.messages: List[Tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))


@dataclass
class PendingCall:
    args: Tuple[Any, ...]
    kwargs: Dict[str, Any]
    future: asyncio.Future = field(repr=False)


class ControlledOperation:
    """Async operation whose calls stay pending until the test settles them."""

    __name__ = "controlled_operation"

    def __init__(self):
        self.calls: List[PendingCall] = []

    async def __call__(self, *args: Any, **kwargs: Any) -> Any:
        future = asyncio.get_running_loop().create_future()
        self.calls.append(PendingCall(args=args, kwargs=kwargs, future=future))
        return await future


@pytest.fixture
def notifier():
    """Recording notifier for asserting notifications."""
    return RecordingNotifier()


@pytest.fixture
def controlled_operation():
    """Operation resolved or rejected manually by the test."""
    return ControlledOperation()


@pytest.fixture
def settings(monkeypatch):
    """Settings isolated from the process environment."""
    for name in (
        "NEO_DATASTATE_SHOW_SUCCESS_TOAST",
        "NEO_DATASTATE_SHOW_ERROR_TOAST",
        "NEO_DATASTATE_SUCCESS_MESSAGE",
        "NEO_DATASTATE_DISCARD_STALE_RESPONSES",
        "NEO_DATASTATE_DEFAULT_PAGE_SIZE",
    ):
        monkeypatch.delenv(name, raising=False)
    return DataStateSettings(_env_file=None)


@pytest.fixture
def make_page_payload():
    """Build a page payload the way a paginated API returns it."""
    def _make(page: int, limit: int, total: int) -> Dict[str, Any]:
        start = (page - 1) * limit
        end = min(start + limit, total)
        return {
            "items": [f"item-{i}" for i in range(start + 1, end + 1)],
            "total": total,
        }
    return _make
