"""Request services."""

from .request_executor import RequestExecutor
from .resource_loader import ResourceLoader

__all__ = [
    "RequestExecutor",
    "ResourceLoader",
]
