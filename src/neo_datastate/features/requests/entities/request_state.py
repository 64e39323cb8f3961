"""Request lifecycle entities."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class RequestStatus(str, Enum):
    """Lifecycle status of an asynchronous operation."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class AsyncOperationState(Generic[T]):
    """Snapshot of a request executor's state.

    ``error`` holds the display string produced by the error classifier,
    never the raw exception.
    """

    status: RequestStatus = RequestStatus.IDLE
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def idle(cls, initial_data: Optional[T] = None) -> 'AsyncOperationState[T]':
        """Create the initial state."""
        return cls(status=RequestStatus.IDLE, data=initial_data, error=None)

    def started(self) -> 'AsyncOperationState[T]':
        """Loading state; data is retained while the error is cleared."""
        return replace(self, status=RequestStatus.LOADING, error=None)

    def succeeded(self, data: T) -> 'AsyncOperationState[T]':
        return AsyncOperationState(status=RequestStatus.SUCCESS, data=data, error=None)

    def failed(self, message: str) -> 'AsyncOperationState[T]':
        return replace(self, status=RequestStatus.ERROR, error=message)

    @property
    def loading(self) -> bool:
        return self.status == RequestStatus.LOADING

    @property
    def is_idle(self) -> bool:
        return self.status == RequestStatus.IDLE

    @property
    def is_success(self) -> bool:
        return self.status == RequestStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == RequestStatus.ERROR
