"""Neo-DataState - request and pagination state for data-driven screens.

This library wraps fallible asynchronous operations with a consistent
idle/loading/success/error lifecycle and provides page arithmetic for
collections held in memory or fetched page by page.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import (
    DataStateSettings,
    get_settings,
    get_logger,
)

from .core.exceptions import (
    # Base Exception
    NeoDataStateError,

    # Request Exceptions
    ConfigurationError,
    RequestError,
    NetworkRequestError,
    RequestTimeoutError,
    ApiRequestError,

    # Error kinds
    ErrorKind,
)

from .features.requests import (
    RequestStatus,
    AsyncOperationState,
    RequestOptions,
    Notifier,
    LoggingNotifier,
    NullNotifier,
    RequestExecutor,
    ResourceLoader,
    classify_error,
    get_error_message,
)

from .features.pagination import (
    ELLIPSIS,
    PageRange,
    PaginationState,
    PageRequest,
    FetchEffect,
    get_page_numbers,
    transition,
    PaginationController,
    ClientPagination,
    ServerPaginatedController,
)

__all__ = [
    "__version__",

    # Configuration
    "DataStateSettings",
    "get_settings",
    "get_logger",

    # Exceptions
    "NeoDataStateError",
    "ConfigurationError",
    "RequestError",
    "NetworkRequestError",
    "RequestTimeoutError",
    "ApiRequestError",
    "ErrorKind",

    # Requests
    "RequestStatus",
    "AsyncOperationState",
    "RequestOptions",
    "Notifier",
    "LoggingNotifier",
    "NullNotifier",
    "RequestExecutor",
    "ResourceLoader",
    "classify_error",
    "get_error_message",

    # Pagination
    "ELLIPSIS",
    "PageRange",
    "PaginationState",
    "PageRequest",
    "FetchEffect",
    "get_page_numbers",
    "transition",
    "PaginationController",
    "ClientPagination",
    "ServerPaginatedController",
]
