"""Error types raised by the markertrack API client.

Purpose:
- Give callers of `UserApiClient` one exception type for HTTP failures.
- Expose HTTP-oriented context (status code, error body) for diagnosis.
"""

from __future__ import annotations

from typing import Any, Optional


class MarkerTrackApiError(Exception):
    """Base error for markertrack API failures.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the server (``detail`` of the JSON body, or raw text).
    """

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details
