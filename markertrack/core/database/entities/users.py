"""
User entity models.

This module contains the database entity for registered users. A user owns
the JWT issued at registration and a stream of marker events.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlmodel import Column, DateTime, Field, Relationship

from ..base import Base, utc_now_naive

if TYPE_CHECKING:
    from .markers import UserMarker


def fold_email(email: str) -> str:
    """Case-fold an email for comparisons (full Unicode folding, not just ASCII)."""
    return email.casefold()


def _email_normalized_default(context) -> str:
    return fold_email(context.get_current_parameters()["email"])


class UserBase(Base):
    """Base fields for a user."""

    first_name: str = Field(max_length=128, description="Given name")
    last_name: str = Field(max_length=128, description="Family name")
    email: str = Field(max_length=256, index=True, description="Email address, unique among active users")


class User(UserBase, table=True):
    """Registered user.

    Email uniqueness is enforced case-insensitively among active users by
    the registration service rather than by a database constraint, so a
    deactivated account does not block re-registration. Lookups go through
    ``email_normalized``, which is filled from ``email`` on insert.

    Table: users
    """

    __tablename__ = "users"
    __table_args__ = ({"extend_existing": True},)

    id: Optional[int] = Field(default=None, primary_key=True)

    email_normalized: Optional[str] = Field(
        default=None,
        max_length=256,
        index=True,
        sa_column_kwargs={"default": _email_normalized_default},
        description="Case-folded email used for duplicate checks",
    )
    registration_date: datetime = Field(
        default_factory=utc_now_naive,
        sa_column=Column(DateTime, nullable=False),
        description="Registration time (UTC)",
    )
    is_active: bool = Field(default=True, index=True, description="Inactive users are hidden from every query")
    token: Optional[str] = Field(default=None, description="JWT issued at registration")

    user_markers: List["UserMarker"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "UserMarker.id"},
    )

    @property
    def full_name(self) -> str:
        """Display name as ``"{first_name} {last_name}"``."""
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, active={self.is_active})"
