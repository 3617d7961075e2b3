"""
I/O models for API requests and responses.

This package contains Pydantic-based I/O schemas that define the contract
between API endpoints and clients. These models are separate from database
entities so the JSON contract (camelCase field names) can evolve
independently of the tables.

Modules:
- base: Shared camelCase configuration
- users: Registration and progress models
- markers: Marker catalogue and marker event models
"""

from .markers import MarkerCreate, MarkerEventCreate, MarkerModel, MarkerRead
from .users import MarkerResponse, UserCreate, UserCreated

__all__ = [
    "MarkerCreate",
    "MarkerEventCreate",
    "MarkerModel",
    "MarkerRead",
    "MarkerResponse",
    "UserCreate",
    "UserCreated",
]
