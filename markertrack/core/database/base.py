"""
Base database models and utilities.

This module provides the foundational database components used by every
entity in the database layer using SQLModel.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import ConfigDict
from sqlmodel import SQLModel


class Base(SQLModel):
    """Base class for all SQLModel entities."""

    model_config = ConfigDict(arbitrary_types_allowed=True)


def utc_now_naive() -> datetime:
    """Get current UTC datetime as naive datetime.

    Timestamps are stored without timezone so they compare consistently on
    SQLite and PostgreSQL ``timestamp without time zone`` columns.

    Returns:
        Current UTC datetime without timezone info
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_utc_naive(value: datetime) -> datetime:
    """Normalize a datetime to naive UTC.

    Aware values are converted to UTC first; naive values are assumed to be UTC.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
