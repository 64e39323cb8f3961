"""Exceptions module for neo-datastate.

This module provides the exception hierarchy for neo-datastate and the
status-code to error-kind mapping used by the error classifier.
"""

from .base import (
    NeoDataStateError,
    ConfigurationError,
)

from .request import (
    # Request Errors
    RequestError,
    NetworkRequestError,
    RequestTimeoutError,
    ApiRequestError,
)

from .http_mapping import (
    ErrorKind,
    STATUS_KIND_MAP,
    get_error_kind,
)

__all__ = [
    # Base
    "NeoDataStateError",

    # Configuration Errors
    "ConfigurationError",

    # Request Errors
    "RequestError",
    "NetworkRequestError",
    "RequestTimeoutError",
    "ApiRequestError",

    # Mapping
    "ErrorKind",
    "STATUS_KIND_MAP",
    "get_error_kind",
]
