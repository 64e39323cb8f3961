"""Request executor service.

Wraps an arbitrary asynchronous operation with an idle/loading/success/error
lifecycle. Every call to ``execute`` awaits the operation exactly once; the
outcome is recorded on the executor and handed back to the caller, failures
included, so callers doing optimistic updates can roll back.
"""

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Generic, Optional, TypeVar

from ..adapters.notifiers import NullNotifier
from ..entities.request_options import RequestOptions
from ..entities.request_state import AsyncOperationState, RequestStatus
from ..protocols.notifier import ErrorClassifier, Notifier
from ..utils.error_handling import get_error_message, log_error

logger = logging.getLogger(__name__)

T = TypeVar('T')


async def _maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


class RequestExecutor(Generic[T]):
    """Executes a fallible asynchronous operation and tracks its state.

    Overlapping calls are not serialized: each one runs to completion and,
    by default, whichever finishes last writes the final state. With
    ``RequestOptions.discard_stale`` only the most recently issued call may
    write state, notify or fire callbacks; older calls still return (or
    raise) to their own caller.
    """

    def __init__(
        self,
        operation: Callable[..., Awaitable[T]],
        options: Optional[RequestOptions] = None,
        notifier: Optional[Notifier] = None,
        classifier: Optional[ErrorClassifier] = None,
        name: Optional[str] = None
    ):
        """Initialize the executor.

        Args:
            operation: Coroutine function performing the request
            options: Callbacks, notification flags and initial data
            notifier: Notification surface, notifications are dropped when omitted
            classifier: Maps a raw failure to a display string
            name: Operation name used in logs, defaults to the function name
        """
        self._operation = operation
        self._options = options or RequestOptions()
        self._notifier = notifier or NullNotifier()
        self._classifier = classifier or get_error_message
        self._name = name or getattr(operation, "__name__", None) or "API Call"
        self._state: AsyncOperationState[T] = AsyncOperationState.idle(self._options.initial_data)
        self._epoch = 0

    @property
    def state(self) -> AsyncOperationState[T]:
        return self._state

    @property
    def data(self) -> Optional[T]:
        return self._state.data

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def status(self) -> RequestStatus:
        return self._state.status

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def initial_data(self) -> Any:
        return self._options.initial_data

    @property
    def options(self) -> RequestOptions:
        return self._options

    @property
    def name(self) -> str:
        return self._name

    def _is_current(self, epoch: int) -> bool:
        return not self._options.discard_stale or epoch == self._epoch

    def _notify(self, kind: str, message: str) -> None:
        try:
            getattr(self._notifier, kind)(message)
        except Exception as e:
            logger.warning(f"Notifier failed to deliver {kind} notification for {self._name}: {e}")

    async def execute(self, *args: Any, **kwargs: Any) -> T:
        """Run the wrapped operation once.

        Cancellation is not treated as a failure: the state held before the
        call is restored, unless a newer call has started meanwhile.

        Returns:
            The operation's result

        Raises:
            Exception: The operation's original exception, after the error
                state has been recorded
        """
        self._epoch += 1
        epoch = self._epoch
        previous_state = self._state
        self._state = self._state.started()
        logger.debug(f"Executing {self._name} (request #{epoch})")

        try:
            result = await self._operation(*args, **kwargs)
        except asyncio.CancelledError:
            if epoch == self._epoch:
                self._state = previous_state
            logger.debug(f"{self._name} cancelled (request #{epoch})")
            raise
        except Exception as error:
            message = self._classifier(error)
            log_error(self._name, error)

            if not self._is_current(epoch):
                logger.debug(f"Discarding stale failure of {self._name} (request #{epoch})")
                raise

            self._state = self._state.failed(message)
            if self._options.show_error_toast:
                self._notify("error", message)
            if self._options.on_error:
                await _maybe_await(self._options.on_error(message, error))
            raise

        if not self._is_current(epoch):
            logger.debug(f"Discarding stale result of {self._name} (request #{epoch})")
            return result

        self._state = self._state.succeeded(result)
        logger.debug(f"{self._name} succeeded (request #{epoch})")

        if self._options.show_success_toast:
            self._notify("success", self._options.success_message)
        if self._options.on_success:
            await _maybe_await(self._options.on_success(result))

        return result

    def reset(self) -> None:
        """Restore the idle state with the initial data.

        In-flight executions are not cancelled; unless stale results are
        discarded, a later resolution still overwrites the reset state.
        """
        self._epoch += 1
        self._state = AsyncOperationState.idle(self._options.initial_data)
