"""Database fixtures shared by the unit tests.

Every test gets its own in-memory SQLite database. ``StaticPool`` keeps the
single connection alive so all sessions of a test see the same tables.
"""

from __future__ import annotations

from datetime import datetime
from typing import AsyncGenerator, Optional

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel.pool import StaticPool

from markertrack.core.database import RepoBundle, build_repos, create_all
from markertrack.core.database.entities import Marker, User, UserMarker

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for one test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_all(engine)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest_asyncio.fixture(name="session")
async def session_fixture(session_maker) -> AsyncGenerator[AsyncSession, None]:
    """Create a new session for each test."""
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def repos(session) -> RepoBundle:
    return build_repos(session)


@pytest_asyncio.fixture
async def make_user(repos):
    """Factory inserting a user directly, bypassing registration."""

    async def _make_user(
        email: str,
        first_name: str = "Test",
        last_name: str = "User",
        registration_date: Optional[datetime] = None,
        is_active: bool = True,
    ) -> User:
        return await repos.users.create(
            User(
                first_name=first_name,
                last_name=last_name,
                email=email,
                registration_date=registration_date or datetime(2026, 1, 1, 12, 0, 0),
                is_active=is_active,
                token="not-a-real-token",
            )
        )

    return _make_user


@pytest_asyncio.fixture
async def make_marker(repos):
    """Factory inserting a catalogue marker."""

    async def _make_marker(key: str, value: str) -> Marker:
        return await repos.markers.create(Marker(key=key, value=value))

    return _make_marker


@pytest_asyncio.fixture
async def add_event(repos):
    """Factory inserting a marker event for a user."""

    async def _add_event(user: User, marker: Marker, date_time: datetime) -> UserMarker:
        return await repos.user_markers.create(UserMarker(user_id=user.id, marker_id=marker.id, date_time=date_time))

    return _add_event
