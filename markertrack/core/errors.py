"""Domain error types for markertrack.

Purpose:
- Give the service layer typed failures for validation and lookup problems.
- Carry the HTTP status code the API should answer with, so a single
  exception handler can translate any of them into a JSON response.

Usage:
- Raise a subclass from services; never raise ``HTTPException`` there.
- Catch ``MarkerTrackError`` for any domain failure.
"""

from __future__ import annotations

from typing import Any, Optional


class MarkerTrackError(Exception):
    """Base error for domain failures.

    Args:
        message: Human-readable error description, returned as ``detail``.
        details: Optional structured context for logging.
    """

    status_code: int = 400

    def __init__(self, message: str, *, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class RequiredFieldError(MarkerTrackError):
    """A required request field is missing, empty or whitespace."""

    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required", details={"field": field})
        self.field = field


class DuplicateEmailError(MarkerTrackError):
    """An active user already uses this email."""

    status_code = 409

    def __init__(self, email: str) -> None:
        super().__init__(f"'{email}' already exists", details={"email": email})
        self.email = email


class DuplicateMarkerError(MarkerTrackError):
    """A marker with this key already exists."""

    status_code = 409

    def __init__(self, key: str) -> None:
        super().__init__(f"Marker '{key}' already exists", details={"key": key})
        self.key = key


class UserNotFoundError(MarkerTrackError):
    """No active user has the requested id."""

    status_code = 404

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with id '{user_id}' doesn't exist", details={"user_id": user_id})
        self.user_id = user_id


class MarkerNotFoundError(MarkerTrackError):
    """No marker has the requested key."""

    status_code = 404

    def __init__(self, key: str) -> None:
        super().__init__(f"Marker '{key}' doesn't exist", details={"key": key})
        self.key = key
