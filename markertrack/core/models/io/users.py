"""
User I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import timedelta
from typing import List, Optional

from pydantic import AliasChoices, Field, field_serializer

from .base import CamelModel
from .markers import MarkerModel


class UserCreate(CamelModel):
    """Schema for registering a user.

    Every field is optional at the schema level: the registration service
    reports missing values itself, in a fixed order, with a readable message.
    """

    email: Optional[str] = Field(default=None, description="Email address")
    first_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("firstName", "firstname", "first_name"),
        description="Given name",
    )
    last_name: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("lastName", "lastname", "last_name"),
        description="Family name",
    )


class UserCreated(CamelModel):
    """Registration result: the new user's id and bearer token."""

    id: int
    token: str


class MarkerResponse(CamelModel):
    """A user's marker events and derived progress."""

    user_id: int
    user_name: str = Field(description="First and last name separated by a space")
    progress: timedelta = Field(description="Latest marker time minus registration time, in seconds")
    markers: List[MarkerModel] = Field(default_factory=list)

    @field_serializer("progress")
    def _serialize_progress(self, progress: timedelta) -> float:
        return progress.total_seconds()
