"""
Marker entity models.

This module contains the marker catalogue and the marker events that link a
user to a marker at a point in time. A user's progress is derived from these
events and never stored.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlmodel import Column, DateTime, Field, Relationship

from ..base import Base, utc_now_naive

if TYPE_CHECKING:
    from .users import User


class MarkerBase(Base):
    """Base fields for a marker."""

    key: str = Field(max_length=64, unique=True, index=True, description="Marker identifier")
    value: str = Field(max_length=16, description="Letter shown for the marker")


class Marker(MarkerBase, table=True):
    """A named milestone users can reach.

    Table: markers
    """

    __tablename__ = "markers"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    def __repr__(self) -> str:
        return f"Marker(key={self.key}, value={self.value})"


class UserMarker(Base, table=True):
    """A user reaching a marker at a given time.

    Table: user_markers
    """

    __tablename__ = "user_markers"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    marker_id: int = Field(foreign_key="markers.id", index=True)
    date_time: datetime = Field(
        default_factory=utc_now_naive,
        sa_column=Column(DateTime, nullable=False),
        description="Event time (UTC)",
    )

    user: Optional["User"] = Relationship(back_populates="user_markers")
    marker: Optional[Marker] = Relationship()

    def __repr__(self) -> str:
        return f"UserMarker(user_id={self.user_id}, marker_id={self.marker_id}, date_time={self.date_time})"
