"""Request failure exceptions.

Transports raise (or are wrapped into) these exceptions so the error
classifier can turn any failure into an error kind and a display string.
"""

from typing import Any, Dict, List, Optional, Union

from .base import NeoDataStateError


# Request Errors
class RequestError(NeoDataStateError):
    """Base class for failures of a wrapped asynchronous operation."""
    pass


class NetworkRequestError(RequestError):
    """Raised when no response was received from the remote service."""

    def __init__(
        self,
        message: str = "Network error. Please check your internet connection.",
        original_error: Optional[BaseException] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.original_error = original_error


class RequestTimeoutError(RequestError):
    """Raised when the remote service took too long to respond."""

    def __init__(
        self,
        message: str = "Request timeout. Please try again.",
        original_error: Optional[BaseException] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.original_error = original_error


ValidationMessages = Union[List[Any], Dict[str, Any]]


class ApiRequestError(RequestError):
    """Raised when the remote service answered with a failure status.

    Carries the numeric status code and, for validation failures, the
    field-level messages returned by the service.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        errors: Optional[ValidationMessages] = None,
        error_type: str = "API_ERROR",
        original_error: Optional[BaseException] = None,
        **kwargs
    ):
        super().__init__(message or "", **kwargs)
        self.status_code = status_code
        self.errors = errors
        self.error_type = error_type
        self.original_error = original_error

    @property
    def status(self) -> Optional[int]:
        """Alias for status_code."""
        return self.status_code
