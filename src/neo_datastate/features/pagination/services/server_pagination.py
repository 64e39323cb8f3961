"""Server-driven pagination.

Drives page-at-a-time remote fetches through a RequestExecutor. Every
navigation updates the local page state and then fetches that page; the
total item count is taken from each successful payload.
"""

import inspect
import logging
from dataclasses import replace
from typing import Any, Awaitable, Callable, Generic, List, Mapping, Optional, TypeVar

from ....config.settings import DataStateSettings, get_settings
from ...requests.entities.request_options import RequestOptions
from ...requests.entities.request_state import RequestStatus
from ...requests.protocols.notifier import ErrorClassifier, Notifier
from ...requests.services.request_executor import RequestExecutor
from ..entities.pagination_state import PageMarker, PageRange, PaginationState
from ..entities.responses import extract_items, extract_total
from ..transitions import (
    ChangePageSize,
    FetchEffect,
    FirstPage,
    GoToPage,
    LastPage,
    NextPage,
    PageAction,
    PrevPage,
    Refetch,
    transition,
)
from ..utils.page_window import get_page_numbers

logger = logging.getLogger(__name__)

T = TypeVar('T')

PageFetcher = Callable[[Mapping[str, int]], Awaitable[Any]]


class ServerPaginatedController(Generic[T]):
    """Page/limit/total bookkeeping coupled to a remote fetch operation.

    ``fetch`` receives ``{"page": ..., "limit": ...}`` and resolves to a
    payload carrying the page's ``items`` (or ``data``) and a ``total``
    (or ``pagination.total``). The requested initial page is kept as-is
    until the first payload reports a total; from then on the current page
    is clamped into the known page count.
    """

    def __init__(
        self,
        fetch: PageFetcher,
        initial_page: int = 1,
        initial_limit: int = 10,
        options: Optional[RequestOptions] = None,
        notifier: Optional[Notifier] = None,
        classifier: Optional[ErrorClassifier] = None
    ):
        options = options or RequestOptions()
        self._on_success = options.on_success
        self._state = PaginationState(
            current_page=max(1, initial_page),
            page_size=max(1, initial_limit),
            total_items=0,
        )
        self._executor: RequestExecutor[Any] = RequestExecutor(
            fetch,
            options=replace(options, on_success=self._handle_success),
            notifier=notifier,
            classifier=classifier,
            name=getattr(fetch, "__name__", None),
        )

    @classmethod
    def from_settings(
        cls,
        fetch: PageFetcher,
        settings: Optional[DataStateSettings] = None,
        **kwargs: Any
    ) -> 'ServerPaginatedController[T]':
        """Create a controller whose defaults come from settings."""
        settings = settings or get_settings()
        kwargs.setdefault("initial_page", settings.default_page)
        kwargs.setdefault("initial_limit", settings.clamp_page_size(settings.default_server_page_size))
        kwargs.setdefault("options", RequestOptions.from_settings(settings))
        return cls(fetch, **kwargs)

    async def _handle_success(self, payload: Any) -> None:
        total = extract_total(payload)
        if total is not None:
            self._state = self._state.with_total_items(total)
        else:
            logger.debug(f"Payload from {self._executor.name} carries no total, keeping {self._state.total_items}")

        if self._on_success:
            result = self._on_success(payload)
            if inspect.isawaitable(result):
                await result

    # Request state

    @property
    def executor(self) -> RequestExecutor[Any]:
        return self._executor

    @property
    def payload(self) -> Any:
        """Last successful payload, as returned by the fetch operation."""
        return self._executor.data

    @property
    def data(self) -> List[T]:
        """Items of the last successful payload, [] before any success."""
        return extract_items(self._executor.data)

    @property
    def loading(self) -> bool:
        return self._executor.loading

    @property
    def error(self) -> Optional[str]:
        return self._executor.error

    @property
    def status(self) -> RequestStatus:
        return self._executor.status

    # Pagination state

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def page(self) -> int:
        return self._state.current_page

    @property
    def limit(self) -> int:
        return self._state.page_size

    @property
    def total_items(self) -> int:
        return self._state.total_items

    @property
    def total_pages(self) -> int:
        return self._state.total_pages

    @property
    def range(self) -> PageRange:
        return self._state.range

    @property
    def can_go_next(self) -> bool:
        return self._state.can_go_next

    @property
    def can_go_prev(self) -> bool:
        return self._state.can_go_prev

    def get_page_numbers(self) -> List[PageMarker]:
        return get_page_numbers(self._state.current_page, self._state.total_pages)

    # Navigation

    async def dispatch(self, action: PageAction) -> Optional[Any]:
        """Apply a navigation action and run the fetch it calls for.

        Returns:
            The fetched payload, or None when the action fetched nothing

        Raises:
            Exception: The fetch operation's original exception
        """
        self._state, effect = transition(self._state, action)
        if effect is None:
            logger.debug(f"{type(action).__name__} is a no-op on page {self._state.current_page}")
            return None
        return await self.run_effect(effect)

    async def run_effect(self, effect: FetchEffect) -> Any:
        return await self._executor.execute(effect.request.as_params())

    async def load(self) -> Any:
        """Fetch the current page."""
        return await self.dispatch(Refetch())

    async def refetch(self) -> Any:
        """Fetch the current page again without changing page state."""
        return await self.dispatch(Refetch())

    async def next_page(self) -> Optional[Any]:
        return await self.dispatch(NextPage())

    async def prev_page(self) -> Optional[Any]:
        return await self.dispatch(PrevPage())

    async def go_to_page(self, page: int) -> Any:
        return await self.dispatch(GoToPage(page))

    async def first_page(self) -> Any:
        return await self.dispatch(FirstPage())

    async def last_page(self) -> Any:
        return await self.dispatch(LastPage())

    async def change_page_size(self, limit: int) -> Any:
        """Change the page size, return to page 1 and fetch it."""
        return await self.dispatch(ChangePageSize(limit))
