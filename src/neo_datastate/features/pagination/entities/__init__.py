"""Pagination entities for state, requests and payloads."""

from .pagination_state import (
    ELLIPSIS,
    PageMarker,
    PageRange,
    PaginationState,
)

from .requests import PageRequest

from .responses import (
    extract_total,
    extract_items,
)

__all__ = [
    # State
    "ELLIPSIS",
    "PageMarker",
    "PageRange",
    "PaginationState",

    # Requests
    "PageRequest",

    # Payloads
    "extract_total",
    "extract_items",
]
