"""Pagination services."""

from .pagination_controller import PaginationController
from .client_pagination import ClientPagination
from .server_pagination import ServerPaginatedController, PageFetcher

__all__ = [
    "PaginationController",
    "ClientPagination",
    "ServerPaginatedController",
    "PageFetcher",
]
