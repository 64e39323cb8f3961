"""Error classification and handling utilities for request executors.

Turns any raw failure (a string, a transport exception, an httpx error, a
structured API failure or a plain mapping) into an error kind and a single
human-readable message, and provides the logging/re-raise helpers executors
build on.
"""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, TypeVar

import httpx

from ....core.exceptions import (
    ApiRequestError,
    ErrorKind,
    NeoDataStateError,
    NetworkRequestError,
    RequestTimeoutError,
    get_error_kind,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_ERROR_MESSAGE = "An unexpected error occurred. Please try again."
NETWORK_ERROR_MESSAGE = "Network error. Please check your internet connection and try again."
TIMEOUT_ERROR_MESSAGE = "Request timeout. The server took too long to respond. Please try again."
VALIDATION_FALLBACK_MESSAGE = "Validation failed"

STATUS_MESSAGES: Dict[int, str] = {
    400: "Invalid request. Please check your input and try again.",
    401: "Your session has expired. Please log in again.",
    403: "You don't have permission to perform this action.",
    404: "The requested resource was not found.",
    409: "This action conflicts with existing data. Please try again.",
    422: "Validation failed. Please check your input.",
    429: "Too many requests. Please slow down and try again later.",
    500: "Server error. Please try again later.",
    502: "Bad gateway. The server is temporarily unavailable.",
    503: "Service unavailable. Please try again later.",
}


def _lookup(error: Any, key: str) -> Any:
    """Read ``key`` from a mapping or an attribute, None when absent."""
    if isinstance(error, Mapping):
        return error.get(key)
    return getattr(error, key, None)


def _response_body(error: Any) -> Optional[Mapping[str, Any]]:
    """Decoded JSON body of the failed response, if there is one."""
    if isinstance(error, httpx.HTTPStatusError):
        try:
            body = error.response.json()
        except ValueError:
            return None
        return body if isinstance(body, Mapping) else None

    response = _lookup(error, "response")
    body = _lookup(response, "data") if response is not None else None
    return body if isinstance(body, Mapping) else None


def get_status_code(error: Any) -> Optional[int]:
    """Extract the numeric HTTP status carried by a failure, if any."""
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code

    for key in ("status_code", "status"):
        value = _lookup(error, key)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    response = _lookup(error, "response")
    if response is not None:
        for key in ("status_code", "status"):
            value = _lookup(response, key)
            if isinstance(value, int) and not isinstance(value, bool):
                return value

    return None


def _get_validation_errors(error: Any) -> Any:
    errors = _lookup(error, "errors")
    if errors:
        return errors
    body = _response_body(error)
    if body:
        return body.get("errors")
    return None


def _get_explicit_message(error: Any) -> Optional[str]:
    """Message the failure carries itself, ignoring exception defaults."""
    if isinstance(error, Mapping):
        message = error.get("message")
        if message:
            return str(message)
    elif isinstance(error, NeoDataStateError):
        if error.message:
            return error.message
    elif isinstance(error, BaseException) and not isinstance(error, httpx.HTTPError):
        text = str(error)
        if text:
            return text

    body = _response_body(error)
    if body and body.get("message"):
        return str(body["message"])
    return None


def classify_error(error: Any) -> ErrorKind:
    """Classify a raw failure into an error kind.

    Args:
        error: Raw failure (exception, mapping or string)

    Returns:
        The error kind, UNKNOWN when nothing identifies the failure
    """
    if isinstance(error, (RequestTimeoutError, httpx.TimeoutException, asyncio.TimeoutError, TimeoutError)):
        return ErrorKind.TIMEOUT

    if isinstance(error, (NetworkRequestError, httpx.TransportError, ConnectionError)):
        return ErrorKind.NETWORK

    error_type = _lookup(error, "type") if isinstance(error, Mapping) else None
    if error_type == "TIMEOUT_ERROR":
        return ErrorKind.TIMEOUT
    if error_type == "NETWORK_ERROR":
        return ErrorKind.NETWORK

    return get_error_kind(get_status_code(error))


def format_validation_errors(errors: Any) -> str:
    """Format field-level validation messages into one string.

    Args:
        errors: List of messages (or {"message": ...} items), or a mapping of
            field name to a message or list of messages

    Returns:
        Messages joined with ", "
    """
    if isinstance(errors, (list, tuple)):
        messages = []
        for item in errors:
            if isinstance(item, Mapping) and item.get("message"):
                messages.append(str(item["message"]))
            else:
                messages.append(str(item))
        return ", ".join(messages)

    if isinstance(errors, Mapping):
        messages = []
        for value in errors.values():
            if isinstance(value, (list, tuple)):
                messages.extend(str(v) for v in value)
            else:
                messages.append(str(value))
        return ", ".join(messages)

    return VALIDATION_FALLBACK_MESSAGE


def get_error_message(error: Any) -> str:
    """Get a user-friendly message for a raw failure.

    Resolution order: plain strings as-is; field-level validation messages;
    the failure's own message; a fixed text per network/timeout/status kind;
    a generic fallback.
    """
    if isinstance(error, str):
        return error

    kind = classify_error(error)

    if kind == ErrorKind.VALIDATION:
        validation_errors = _get_validation_errors(error)
        if validation_errors:
            return format_validation_errors(validation_errors)

    explicit = _get_explicit_message(error)
    if explicit and kind not in (ErrorKind.NETWORK, ErrorKind.TIMEOUT):
        return explicit

    if kind == ErrorKind.NETWORK:
        return explicit if isinstance(error, NetworkRequestError) else NETWORK_ERROR_MESSAGE
    if kind == ErrorKind.TIMEOUT:
        return explicit if isinstance(error, RequestTimeoutError) else TIMEOUT_ERROR_MESSAGE

    status_code = get_status_code(error)
    if status_code is not None:
        return STATUS_MESSAGES.get(status_code, DEFAULT_ERROR_MESSAGE)

    return DEFAULT_ERROR_MESSAGE


def is_network_error(error: Any) -> bool:
    """Check if a failure means no response was received."""
    return classify_error(error) == ErrorKind.NETWORK


def is_auth_error(error: Any) -> bool:
    """Check if a failure is an authentication failure."""
    return get_status_code(error) == 401


def is_validation_error(error: Any) -> bool:
    """Check if a failure is a validation failure."""
    return get_status_code(error) in (400, 422)


def log_error(context: str, error: Any) -> None:
    """Log a failure with its classification.

    Args:
        context: Name of the operation that failed
        error: Raw failure
    """
    message = get_error_message(error)
    logger.error(
        f"[{context}] {message}",
        extra={
            "context": context,
            "error_kind": classify_error(error).value,
            "error_type": type(error).__name__,
            "error_message": message,
        },
        exc_info=error if isinstance(error, BaseException) else None,
    )


def handle_async_error(
    func: Callable[..., Awaitable[T]],
    on_error: Optional[Callable[[str, BaseException], Any]] = None
) -> Callable[..., Awaitable[T]]:
    """Wrap a coroutine function so failures are logged and reported.

    The original exception is always re-raised.
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> T:
        try:
            return await func(*args, **kwargs)
        except Exception as error:
            message = get_error_message(error)
            log_error(getattr(func, "__name__", "AsyncFunction"), error)
            if on_error:
                on_error(message, error)
            raise

    return wrapper


def create_error(message: str, error_type: str = "ERROR", **data: Any) -> ApiRequestError:
    """Create a structured request error.

    Args:
        message: Display message
        error_type: Free-form failure type tag
        **data: ``status``/``status_code`` and ``errors`` populate the
            matching fields, everything else goes to ``details``
    """
    status_code = data.pop("status_code", None)
    if status_code is None:
        status_code = data.pop("status", None)
    errors = data.pop("errors", None)
    return ApiRequestError(
        message=message,
        status_code=status_code,
        errors=errors,
        error_type=error_type,
        details=data,
    )
