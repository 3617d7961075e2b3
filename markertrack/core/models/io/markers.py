"""
Marker I/O models for API requests and responses.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class MarkerModel(CamelModel):
    """A marker event as shown inside a progress response."""

    marker_id: str = Field(description="Key of the reached marker")
    letter: str = Field(description="Letter shown for the marker")
    timestamp: datetime = Field(description="When the marker was reached (UTC)")


class MarkerRead(CamelModel):
    """Schema for reading a catalogue marker."""

    marker_id: str = Field(description="Marker key")
    letter: str = Field(description="Letter shown for the marker")


class MarkerCreate(CamelModel):
    """Schema for adding a marker to the catalogue."""

    marker_id: str = Field(min_length=1, max_length=64, description="Marker key")
    letter: str = Field(min_length=1, max_length=16, description="Letter shown for the marker")


class MarkerEventCreate(CamelModel):
    """Schema for recording that a user reached a marker."""

    marker_id: str = Field(min_length=1, max_length=64, description="Key of the reached marker")
    timestamp: Optional[datetime] = Field(default=None, description="Event time; defaults to now")
