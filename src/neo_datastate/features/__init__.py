"""Features module for neo-datastate.

Request execution and pagination controllers that sit between a caller
wanting data and a caller having data, a loading flag, or an error.
"""

from .requests import RequestExecutor, ResourceLoader
from .pagination import PaginationController, ClientPagination, ServerPaginatedController

__all__ = [
    # Request features
    "RequestExecutor",
    "ResourceLoader",

    # Pagination features
    "PaginationController",
    "ClientPagination",
    "ServerPaginatedController",
]
