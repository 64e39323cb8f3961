"""Pagination feature for neo-datastate.

This module provides page arithmetic and paginated data access:
- PaginationController for pure page/size/total arithmetic and page windows
- ClientPagination for slicing collections already held in memory
- ServerPaginatedController for page-at-a-time remote fetches
- A pure transition function describing navigation as state + fetch effect
"""

# Entities
from .entities import (
    ELLIPSIS,
    PageMarker,
    PageRange,
    PaginationState,
    PageRequest,
    extract_total,
    extract_items,
)

# Transitions
from .transitions import (
    NextPage,
    PrevPage,
    GoToPage,
    FirstPage,
    LastPage,
    ChangePageSize,
    Refetch,
    PageAction,
    FetchEffect,
    transition,
)

# Utils
from .utils import (
    MAX_VISIBLE_PAGES,
    get_page_numbers,
)

# Services
from .services import (
    PaginationController,
    ClientPagination,
    ServerPaginatedController,
    PageFetcher,
)

__all__ = [
    # Entities
    "ELLIPSIS",
    "PageMarker",
    "PageRange",
    "PaginationState",
    "PageRequest",
    "extract_total",
    "extract_items",

    # Transitions
    "NextPage",
    "PrevPage",
    "GoToPage",
    "FirstPage",
    "LastPage",
    "ChangePageSize",
    "Refetch",
    "PageAction",
    "FetchEffect",
    "transition",

    # Utils
    "MAX_VISIBLE_PAGES",
    "get_page_numbers",

    # Services
    "PaginationController",
    "ClientPagination",
    "ServerPaginatedController",
    "PageFetcher",
]
