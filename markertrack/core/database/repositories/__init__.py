"""
Database repository layer using SQLModel.

Each module provides async data access operations for its SQLModel entity.

Modules:
- base: BaseRepository interface and QueryBuilder utilities
- users: User lookups, duplicate-email checks and registration persistence
- markers: Marker catalogue and marker event persistence
"""

from . import base, markers, users

__all__ = [
    "base",
    "markers",
    "users",
]
