"""Request entities: lifecycle state and executor options."""

from .request_state import (
    RequestStatus,
    AsyncOperationState,
)

from .request_options import (
    RequestOptions,
    SuccessCallback,
    ErrorCallback,
)

__all__ = [
    "RequestStatus",
    "AsyncOperationState",
    "RequestOptions",
    "SuccessCallback",
    "ErrorCallback",
]
