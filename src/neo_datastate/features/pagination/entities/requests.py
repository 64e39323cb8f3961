"""Page request entities handed to remote fetch operations."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class PageRequest:
    """Offset-based page request (page/limit)."""

    page: int = 1
    limit: int = 10

    def __post_init__(self):
        """Validate pagination parameters."""
        if self.page < 1:
            raise ValueError("Page must be >= 1")
        if self.limit < 1:
            raise ValueError("Limit must be >= 1")

    @property
    def offset(self) -> int:
        """Calculate offset from page and limit."""
        return (self.page - 1) * self.limit

    def as_params(self) -> Dict[str, int]:
        """Arguments passed to the fetch operation."""
        return {"page": self.page, "limit": self.limit}
