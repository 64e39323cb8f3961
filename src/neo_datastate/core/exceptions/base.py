"""Base exceptions for neo-datastate.

This module defines the base exception hierarchy for the neo-datastate library.
All exceptions inherit from NeoDataStateError and carry an error code and
details so callers can render or log them consistently.
"""

from typing import Any, Dict, Optional


class NeoDataStateError(Exception):
    """Base exception for all neo-datastate errors.

    All exceptions in the neo-datastate library inherit from this base class
    and include structured error information for better debugging.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


# Configuration Errors
class ConfigurationError(NeoDataStateError):
    """Raised when there's a configuration issue."""
    pass
