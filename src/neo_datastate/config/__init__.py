"""Configuration module for neo-datastate.

Settings are read through pydantic-settings, logging through a
dictConfig built from environment variables.
"""

from .settings import (
    DataStateSettings,
    get_settings,
)

from .logging_config import (
    setup_logging,
    get_logger,
    LogLevel,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Settings
    "DataStateSettings",
    "get_settings",

    # Logging
    "setup_logging",
    "get_logger",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
