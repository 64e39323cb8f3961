"""Client-side pagination over a fully loaded collection."""

import logging
from typing import Generic, List, Optional, Sequence, TypeVar

from ....config.settings import DataStateSettings, get_settings
from ..entities.pagination_state import PageMarker, PageRange, PaginationState
from .pagination_controller import PaginationController

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ClientPagination(Generic[T]):
    """Slices an in-memory sequence page by page.

    The sequence is held by reference and only ever sliced. If its length
    changes behind the adapter's back, the next read recomputes the total
    and re-clamps the current page.
    """

    def __init__(self, items: Sequence[T] = (), page_size: int = 20):
        self._source = items
        self._pagination = PaginationController(
            initial_page_size=page_size,
            total_items=len(items),
        )

    @classmethod
    def from_settings(
        cls,
        items: Sequence[T] = (),
        settings: Optional[DataStateSettings] = None
    ) -> 'ClientPagination[T]':
        settings = settings or get_settings()
        return cls(items, page_size=settings.clamp_page_size(settings.default_page_size))

    def _sync(self) -> PaginationController:
        size = len(self._source)
        if size != self._pagination.total_items:
            logger.debug(f"Source length changed from {self._pagination.total_items} to {size}")
            self._pagination.set_total_items(size)
        return self._pagination

    @property
    def source(self) -> Sequence[T]:
        return self._source

    def set_source(self, items: Sequence[T]) -> None:
        """Replace the backing sequence, keeping the page when still valid."""
        self._source = items
        self._sync()

    @property
    def items(self) -> List[T]:
        """Items on the current page."""
        pagination = self._sync()
        start = (pagination.current_page - 1) * pagination.page_size
        return list(self._source[start:start + pagination.page_size])

    @property
    def state(self) -> PaginationState:
        return self._sync().state

    @property
    def current_page(self) -> int:
        return self._sync().current_page

    @property
    def page_size(self) -> int:
        return self._sync().page_size

    @property
    def total_items(self) -> int:
        return self._sync().total_items

    @property
    def total_pages(self) -> int:
        return self._sync().total_pages

    @property
    def range(self) -> PageRange:
        return self._sync().range

    @property
    def can_go_next(self) -> bool:
        return self._sync().can_go_next

    @property
    def can_go_prev(self) -> bool:
        return self._sync().can_go_prev

    def go_to_page(self, page: int) -> None:
        self._sync().go_to_page(page)

    def next_page(self) -> None:
        self._sync().next_page()

    def prev_page(self) -> None:
        self._sync().prev_page()

    def first_page(self) -> None:
        self._sync().first_page()

    def last_page(self) -> None:
        self._sync().last_page()

    def change_page_size(self, page_size: int) -> None:
        self._sync().change_page_size(page_size)

    def reset(self) -> None:
        self._sync().reset()

    def get_page_numbers(self) -> List[PageMarker]:
        return self._sync().get_page_numbers()
