"""Pagination utilities."""

from .page_window import (
    MAX_VISIBLE_PAGES,
    get_page_numbers,
)

__all__ = [
    "MAX_VISIBLE_PAGES",
    "get_page_numbers",
]
