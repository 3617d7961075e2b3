"""
Database entity models.

Modules:
- users: Registered users and their identity/token data
- markers: Marker catalogue and per-user marker events
"""

from . import markers, users
from .markers import Marker, UserMarker
from .users import User

__all__ = [
    "markers",
    "users",
    "Marker",
    "User",
    "UserMarker",
]
