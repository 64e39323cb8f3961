"""Request execution feature for neo-datastate.

This module wraps fallible asynchronous operations with a consistent
idle/loading/success/error lifecycle:
- RequestExecutor for imperative execute/reset
- ResourceLoader for load-once resources with refetch
- Error classification into kinds and display messages
- Notifier protocol and adapters for fire-and-forget notifications
"""

# Entities
from .entities import (
    RequestStatus,
    AsyncOperationState,
    RequestOptions,
)

# Protocols
from .protocols import (
    Notifier,
    ErrorClassifier,
)

# Adapters
from .adapters import (
    LoggingNotifier,
    NullNotifier,
)

# Services
from .services import (
    RequestExecutor,
    ResourceLoader,
)

# Utils
from .utils import (
    classify_error,
    get_error_message,
    format_validation_errors,
    is_network_error,
    is_auth_error,
    is_validation_error,
    log_error,
    handle_async_error,
    create_error,
)

__all__ = [
    # Entities
    "RequestStatus",
    "AsyncOperationState",
    "RequestOptions",

    # Protocols
    "Notifier",
    "ErrorClassifier",

    # Adapters
    "LoggingNotifier",
    "NullNotifier",

    # Services
    "RequestExecutor",
    "ResourceLoader",

    # Utils
    "classify_error",
    "get_error_message",
    "format_validation_errors",
    "is_network_error",
    "is_auth_error",
    "is_validation_error",
    "log_error",
    "handle_async_error",
    "create_error",
]
