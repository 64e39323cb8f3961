"""Notifier implementations."""

import logging
from typing import Optional

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Notifier that routes user notifications to a logger."""

    def __init__(self, target: Optional[logging.Logger] = None):
        self._logger = target or logger

    def success(self, message: str) -> None:
        self._logger.info(message, extra={"notification": "success"})

    def error(self, message: str) -> None:
        self._logger.warning(message, extra={"notification": "error"})

    def info(self, message: str) -> None:
        self._logger.info(message, extra={"notification": "info"})


class NullNotifier:
    """Notifier that drops every notification."""

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass
