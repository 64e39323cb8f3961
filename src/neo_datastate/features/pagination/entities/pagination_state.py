"""Pagination state entities."""

from dataclasses import dataclass, replace
from math import ceil
from typing import Any, Dict, Union

# Marker rendered between non-adjacent page numbers in a page window
ELLIPSIS = "…"

PageMarker = Union[int, str]


@dataclass(frozen=True)
class PageRange:
    """1-based item positions shown on the current page.

    ``end`` is below ``start`` only when the collection is empty.
    """

    start: int
    end: int

    @property
    def count(self) -> int:
        return max(0, self.end - self.start + 1)


@dataclass(frozen=True)
class PaginationState:
    """Page position over a collection of known size.

    Every ``with_*`` method returns a new state whose current page is
    clamped into ``[1, total_pages]``; invalid inputs are clamped, never
    rejected. Constructing a state directly validates its fields.
    """

    current_page: int = 1
    page_size: int = 20
    total_items: int = 0

    def __post_init__(self):
        """Validate pagination fields."""
        if self.page_size < 1:
            raise ValueError("Page size must be >= 1")
        if self.total_items < 0:
            raise ValueError("Total items must be >= 0")
        if self.current_page < 1:
            raise ValueError("Page must be >= 1")

    @classmethod
    def create(cls, current_page: int = 1, page_size: int = 20, total_items: int = 0) -> 'PaginationState':
        """Create a state from untrusted values, clamping each field."""
        state = cls(
            current_page=1,
            page_size=max(1, page_size),
            total_items=max(0, total_items),
        )
        return state.with_page(current_page)

    @property
    def total_pages(self) -> int:
        """Number of pages, at least 1 even for an empty collection."""
        return max(1, ceil(self.total_items / self.page_size))

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def range(self) -> PageRange:
        return PageRange(
            start=self.offset + 1,
            end=min(self.current_page * self.page_size, self.total_items),
        )

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def can_go_prev(self) -> bool:
        return self.current_page > 1

    def clamp_page(self, page: int) -> int:
        return max(1, min(page, self.total_pages))

    def with_page(self, page: int) -> 'PaginationState':
        return replace(self, current_page=self.clamp_page(page))

    def with_page_size(self, page_size: int) -> 'PaginationState':
        """Change the page size and return to the first page."""
        return replace(self, page_size=max(1, page_size), current_page=1)

    def with_total_items(self, total_items: int) -> 'PaginationState':
        updated = replace(self, total_items=max(0, total_items), current_page=1)
        return updated.with_page(self.current_page)

    def next(self) -> 'PaginationState':
        return replace(self, current_page=self.current_page + 1) if self.can_go_next else self

    def prev(self) -> 'PaginationState':
        return replace(self, current_page=self.current_page - 1) if self.can_go_prev else self

    @property
    def page_info(self) -> Dict[str, Any]:
        """Get comprehensive page information."""
        page_range = self.range
        return {
            "current_page": self.current_page,
            "page_size": self.page_size,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
            "has_next": self.can_go_next,
            "has_prev": self.can_go_prev,
            "offset": self.offset,
            "range_start": page_range.start,
            "range_end": page_range.end,
        }
