"""Error handling utilities for requests."""

from .error_handling import (
    DEFAULT_ERROR_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    TIMEOUT_ERROR_MESSAGE,
    STATUS_MESSAGES,
    classify_error,
    get_error_message,
    get_status_code,
    format_validation_errors,
    is_network_error,
    is_auth_error,
    is_validation_error,
    log_error,
    handle_async_error,
    create_error,
)

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "NETWORK_ERROR_MESSAGE",
    "TIMEOUT_ERROR_MESSAGE",
    "STATUS_MESSAGES",
    "classify_error",
    "get_error_message",
    "get_status_code",
    "format_validation_errors",
    "is_network_error",
    "is_auth_error",
    "is_validation_error",
    "log_error",
    "handle_async_error",
    "create_error",
]
