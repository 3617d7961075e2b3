"""
Database layer for markertrack.

Structure:
- entities/: SQLModel table models (users, markers, user markers)
- repositories/: Data access layer, one repository per entity
- session.py: Global engine and session factory management
- utils.py: Engine, session factory and repository bundle helpers
"""

from .base import Base
from .session import (
    async_session_maker,
    dispose_db,
    engine,
    get_session,
    init_db,
)
from .utils import (
    RepoBundle,
    build_repos,
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "RepoBundle",
    "async_session_maker",
    "build_repos",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "dispose_db",
    "engine",
    "get_session",
    "init_db",
]
