"""Core module for neo-datastate.

Clean Core - only exports exceptions and the error-kind mapping.
Controllers are accessed through features/.
"""

from .exceptions import *

__all__ = [
    # Base Exception
    "NeoDataStateError",

    # Configuration Errors
    "ConfigurationError",

    # Request Errors
    "RequestError",
    "NetworkRequestError",
    "RequestTimeoutError",
    "ApiRequestError",

    # Error kinds
    "ErrorKind",
    "STATUS_KIND_MAP",
    "get_error_kind",
]
