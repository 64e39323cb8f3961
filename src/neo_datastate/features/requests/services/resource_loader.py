"""Resource loader service.

Loads a resource once when a screen comes up and lets the caller refetch it
from scratch afterwards.
"""

import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from ..entities.request_options import RequestOptions
from ..entities.request_state import AsyncOperationState, RequestStatus
from ..protocols.notifier import ErrorClassifier, Notifier
from .request_executor import RequestExecutor

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ResourceLoader(Generic[T]):
    """Request executor that loads once on demand and supports refetching."""

    def __init__(
        self,
        operation: Callable[[], Awaitable[T]],
        options: Optional[RequestOptions] = None,
        notifier: Optional[Notifier] = None,
        classifier: Optional[ErrorClassifier] = None,
        skip: bool = False
    ):
        self._executor: RequestExecutor[T] = RequestExecutor(
            operation,
            options=options or RequestOptions(),
            notifier=notifier,
            classifier=classifier,
        )
        self._skip = skip
        self._loaded = False

    @property
    def executor(self) -> RequestExecutor[T]:
        return self._executor

    @property
    def state(self) -> AsyncOperationState[T]:
        return self._executor.state

    @property
    def data(self) -> Optional[T]:
        return self._executor.data

    @property
    def error(self) -> Optional[str]:
        return self._executor.error

    @property
    def status(self) -> RequestStatus:
        return self._executor.status

    @property
    def loading(self) -> bool:
        return self._executor.loading

    @property
    def loaded(self) -> bool:
        """Whether the initial load has been issued."""
        return self._loaded

    @property
    def skip(self) -> bool:
        return self._skip

    async def load(self) -> Optional[T]:
        """Issue the initial load.

        Does nothing when skipped or already loaded and returns the current
        data in that case. Failures propagate like ``RequestExecutor.execute``.
        """
        if self._skip or self._loaded:
            logger.debug(f"Load of {self._executor.name} skipped (skip={self._skip}, loaded={self._loaded})")
            return self._executor.data

        self._loaded = True
        return await self._executor.execute()

    async def refetch(self) -> T:
        """Reset the state and execute the operation again."""
        self._executor.reset()
        self._loaded = True
        return await self._executor.execute()
