"""Pagination controller.

Pure page arithmetic over {current_page, page_size, total_items}. Knows
nothing about where the items come from; every operation is synchronous and
clamps instead of raising.
"""

import logging
from typing import List, Optional

from ....config.settings import DataStateSettings, get_settings
from ..entities.pagination_state import PageMarker, PageRange, PaginationState
from ..utils.page_window import get_page_numbers

logger = logging.getLogger(__name__)


class PaginationController:
    """Mutable page position with navigation operations."""

    def __init__(
        self,
        initial_page: int = 1,
        initial_page_size: int = 20,
        total_items: int = 0
    ):
        self._initial_page = max(1, initial_page)
        self._initial_page_size = max(1, initial_page_size)
        self._state = self._initial_state(total_items)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[DataStateSettings] = None,
        total_items: int = 0
    ) -> 'PaginationController':
        """Create a controller using the configured default page and size."""
        settings = settings or get_settings()
        return cls(
            initial_page=settings.default_page,
            initial_page_size=settings.clamp_page_size(settings.default_page_size),
            total_items=total_items,
        )

    def _initial_state(self, total_items: int) -> PaginationState:
        # The requested page is kept as given until a total is known.
        if total_items > 0:
            return PaginationState.create(
                current_page=self._initial_page,
                page_size=self._initial_page_size,
                total_items=total_items,
            )
        return PaginationState(
            current_page=self._initial_page,
            page_size=self._initial_page_size,
            total_items=0,
        )

    @property
    def state(self) -> PaginationState:
        return self._state

    @property
    def current_page(self) -> int:
        return self._state.current_page

    @property
    def page_size(self) -> int:
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

    def go_to_page(self, page: int) -> None:
        self._state = self._state.with_page(page)

    def next_page(self) -> None:
        self._state = self._state.next()

    def prev_page(self) -> None:
        self._state = self._state.prev()

    def first_page(self) -> None:
        self._state = self._state.with_page(1)

    def last_page(self) -> None:
        self._state = self._state.with_page(self._state.total_pages)

    def change_page_size(self, page_size: int) -> None:
        """Set the page size and return to the first page."""
        self._state = self._state.with_page_size(page_size)

    def set_total_items(self, total_items: int) -> None:
        """Update the collection size, re-clamping the current page."""
        previous_page = self._state.current_page
        self._state = self._state.with_total_items(total_items)
        if self._state.current_page != previous_page:
            logger.debug(
                f"Current page clamped from {previous_page} to {self._state.current_page} "
                f"after total items changed to {self._state.total_items}"
            )

    def reset(self) -> None:
        """Restore the initial page and page size."""
        self._state = self._initial_state(self._state.total_items)

    def get_page_numbers(self) -> List[PageMarker]:
        """Page window for the current position."""
        return get_page_numbers(self._state.current_page, self._state.total_pages)
