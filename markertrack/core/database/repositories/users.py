"""
User repository implementation.

This module provides data access operations for users, including the eager
loading of marker events used by the progress endpoints and the
case-insensitive email lookup used by registration.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import selectinload
from sqlmodel import select

from ..entities.markers import UserMarker
from ..entities.users import User, fold_email
from .base import BaseRepository, QueryBuilder


def _with_markers(stmt):
    """Eager-load ``user_markers`` and each event's ``marker``, refreshing identity-mapped users."""
    return stmt.options(selectinload(User.user_markers).selectinload(UserMarker.marker)).execution_options(
        populate_existing=True
    )


class UserRepository(BaseRepository[User]):
    """Repository for user data access operations using SQLModel."""

    def __init__(self, session) -> None:
        """Initialize repository with database session.

        Args:
            session: Async session for database operations
        """
        super().__init__(session, User)

    async def create(self, user: User) -> User:
        """Persist a new user.

        Args:
            user: User SQLModel instance

        Returns:
            Persisted User with generated id
        """
        return await self.save(user)

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get a user by id, active or not.

        Args:
            user_id: User ID

        Returns:
            User instance or None
        """
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_active_with_markers(self, user_id: int) -> Optional[User]:
        """Get an active user with marker events and markers loaded.

        Args:
            user_id: User ID

        Returns:
            User instance or None when missing or inactive
        """
        stmt = _with_markers(select(User).where((User.id == user_id) & (User.is_active == True)))  # noqa: E712
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_active_with_markers(self) -> List[User]:
        """List every active user with marker events and markers loaded.

        Returns:
            Active users ordered by id
        """
        stmt = _with_markers(select(User).where(User.is_active == True).order_by(User.id))  # noqa: E712
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_active_by_email(self, email: str) -> Optional[User]:
        """Find an active user whose email matches after Unicode case folding.

        Args:
            email: Email address to look up

        Returns:
            The first matching active user or None
        """
        stmt = (
            select(User)
            .where((User.email_normalized == fold_email(email)) & (User.is_active == True))  # noqa: E712
            .order_by(User.id)
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[User]:
        """List users with optional pagination and equality filters.

        Args:
            limit: Maximum records to return
            offset: Records to skip
            filters: Field filters (e.g. ``{"is_active": True}``)

        Returns:
            List of User instances ordered by id
        """
        stmt = select(User).order_by(User.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, User, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
