"""
Database utility functions for engine and session management.

Functions:
- create_engine: Creates async SQLAlchemy engine with URL normalization
- create_sessionmaker: Creates async session factory with safe defaults
- create_all: Creates all tables from ORM metadata (for tests/dev)
- build_repos: Builds the repository bundle for one session
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from . import entities  # noqa: F401  (registers all tables on the metadata)
from .base import Base
from .repositories.markers import MarkerRepository, UserMarkerRepository
from .repositories.users import UserRepository


def normalize_database_url(db_url: str) -> str:
    """Rewrite Postgres URLs so the async driver is used.

    ``postgres://``, ``postgresql://`` and other driver variants become
    ``postgresql+asyncpg://``. Every other URL is returned unchanged.
    """
    return re.sub(r"^postgres(?:ql)?(?:\+[a-z0-9_]+)?://", "postgresql+asyncpg://", db_url, count=1)


def create_engine(db_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine.

    Args:
        db_url: Database connection URL
        echo: Log every SQL statement

    Returns:
        Configured AsyncEngine instance
    """
    url = normalize_database_url(db_url)
    if url.startswith("sqlite"):
        return create_async_engine(url, echo=echo, connect_args={"check_same_thread": False})
    return create_async_engine(url, echo=echo, pool_pre_ping=True)


def create_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an ``async_sessionmaker`` with safe defaults for this project.

    Args:
        engine: Async SQLAlchemy engine

    Returns:
        Configured async session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_all(engine: AsyncEngine) -> None:
    """Create all tables for the current ORM metadata.

    This is mainly intended for tests and local development.
    Production should use Alembic migrations instead.

    Args:
        engine: Async SQLAlchemy engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@dataclass(frozen=True)
class RepoBundle:
    """Convenience bundle of the repositories sharing one session."""

    users: UserRepository
    markers: MarkerRepository
    user_markers: UserMarkerRepository


def build_repos(session: AsyncSession) -> RepoBundle:
    """Build a ``RepoBundle`` bound to ``session``.

    Args:
        session: Async session shared by every repository in the bundle

    Returns:
        Bundle containing all repository instances
    """
    return RepoBundle(
        users=UserRepository(session),
        markers=MarkerRepository(session),
        user_markers=UserMarkerRepository(session),
    )
