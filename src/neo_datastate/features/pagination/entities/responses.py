"""Readers for page payloads returned by remote fetch operations.

Payloads may be mappings or objects (e.g. pydantic models); both are read
the same way.
"""

import logging
from typing import Any, List, Mapping, Optional

logger = logging.getLogger(__name__)


def _field(payload: Any, name: str) -> Any:
    if payload is None:
        return None
    if isinstance(payload, Mapping):
        return payload.get(name)
    return getattr(payload, name, None)


def extract_total(payload: Any) -> Optional[int]:
    """Read the total item count from a page payload.

    A top-level ``total`` takes precedence over ``pagination.total``.

    Returns:
        The total, or None when the payload carries neither field or its
        value is not an integer
    """
    total = _field(payload, "total")
    if total is None:
        total = _field(_field(payload, "pagination"), "total")
    if total is None:
        return None
    try:
        return int(total)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric total in page payload: {total!r}")
        return None


def extract_items(payload: Any) -> List[Any]:
    """Read the page's items: ``items``, falling back to ``data``, else []."""
    items = _field(payload, "items")
    if items is None:
        items = _field(payload, "data")
    return list(items) if items is not None else []
