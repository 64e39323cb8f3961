"""HTTP status code to error kind mapping.

Maps the numeric status carried by a failed request onto the coarse error
kinds used to pick a display message.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorKind(str, Enum):
    """Classification of a failed asynchronous operation."""
    VALIDATION = "validation"
    AUTH = "auth"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    RATE_LIMITED = "rate_limited"
    SERVER = "server"
    NETWORK = "network"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


STATUS_KIND_MAP: Dict[int, ErrorKind] = {
    # 400 Bad Request / 422 Unprocessable Entity
    400: ErrorKind.VALIDATION,
    422: ErrorKind.VALIDATION,

    # 401 Unauthorized
    401: ErrorKind.AUTH,

    # 403 Forbidden
    403: ErrorKind.FORBIDDEN,

    # 404 Not Found
    404: ErrorKind.NOT_FOUND,

    # 409 Conflict
    409: ErrorKind.CONFLICT,

    # 429 Too Many Requests
    429: ErrorKind.RATE_LIMITED,
}


def get_error_kind(status_code: Optional[int]) -> ErrorKind:
    """Get error kind for an HTTP status code.

    Args:
        status_code: Numeric status of the failed response

    Returns:
        Mapped error kind, SERVER for any 5xx, UNKNOWN otherwise
    """
    if status_code is None:
        return ErrorKind.UNKNOWN

    kind = STATUS_KIND_MAP.get(status_code)
    if kind is not None:
        return kind

    if 500 <= status_code <= 599:
        return ErrorKind.SERVER

    return ErrorKind.UNKNOWN
