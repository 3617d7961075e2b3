"""
Marker and marker event repository implementations.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlmodel import select

from ..entities.markers import Marker, UserMarker
from .base import BaseRepository, QueryBuilder


class MarkerRepository(BaseRepository[Marker]):
    """Repository for the marker catalogue."""

    def __init__(self, session) -> None:
        super().__init__(session, Marker)

    async def create(self, marker: Marker) -> Marker:
        return await self.save(marker)

    async def get_by_id(self, marker_id: int) -> Optional[Marker]:
        stmt = select(Marker).where(Marker.id == marker_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_key(self, key: str) -> Optional[Marker]:
        """Get a marker by its key (exact match)."""
        stmt = select(Marker).where(Marker.key == key)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[Marker]:
        """List markers ordered by key."""
        stmt = select(Marker).order_by(Marker.key)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, Marker, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())


class UserMarkerRepository(BaseRepository[UserMarker]):
    """Repository for marker events."""

    def __init__(self, session) -> None:
        super().__init__(session, UserMarker)

    async def create(self, user_marker: UserMarker) -> UserMarker:
        return await self.save(user_marker)

    async def get_by_id(self, user_marker_id: int) -> Optional[UserMarker]:
        stmt = select(UserMarker).where(UserMarker.id == user_marker_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filters: Optional[Dict[str, Any]] = None,
    ) -> List[UserMarker]:
        stmt = select(UserMarker).order_by(UserMarker.id)
        if filters:
            stmt = QueryBuilder.apply_filters(stmt, UserMarker, filters)
        stmt = QueryBuilder.apply_pagination(stmt, limit, offset)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
