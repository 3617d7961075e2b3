"""
User Endpoints.

Registration, progress lookups and marker events.

- ``GET /api/user``: ranked progress of all active users (anonymous)
- ``GET /api/user/{user_id}``: progress of one active user (bearer token)
- ``POST /api/user``: register and receive a token (anonymous)
- ``POST /api/user/{user_id}/marker``: record a marker event (bearer token)
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, status

from markertrack.core.logging_config import get_logger
from markertrack.core.models.io import MarkerEventCreate, MarkerResponse, UserCreate, UserCreated
from markertrack.server.services.deps import TokenDep, UserServiceDep

logger = get_logger(__name__)

router = APIRouter(tags=["user"])


@router.get(
    "",
    response_model=List[MarkerResponse],
    summary="List User Progress",
    description="Progress of every active user, most markers first, then fastest first.",
    response_description="Ranked list of progress objects.",
)
async def list_user_progress(service: UserServiceDep) -> List[MarkerResponse]:
    """
    List progress of all active users.

    Each entry carries the user's name, their marker events and the time
    between registration and the latest event. Users with more markers come
    first; ties are broken by the smaller elapsed time.
    """
    return await service.list_progress()


@router.get(
    "/{user_id:int}",
    response_model=MarkerResponse,
    summary="Get User Progress",
    description="Progress of a single active user. Requires a bearer token.",
    responses={
        200: {"description": "Progress found"},
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "No active user with this id"},
    },
)
async def get_user_progress(user_id: int, service: UserServiceDep, token: TokenDep) -> MarkerResponse:
    """
    Get progress of one user.

    - **user_id**: The user's numeric identifier.
    """
    logger.debug(f"Progress of user {user_id} requested by {token.sub}")
    return await service.get_progress(user_id)


@router.post(
    "",
    response_model=UserCreated,
    summary="Register User",
    description="Register a user and issue the bearer token used by authenticated routes.",
    responses={
        200: {"description": "User registered"},
        400: {"description": "A required field is missing"},
        409: {"description": "An active user already has this email"},
    },
)
async def register_user(payload: UserCreate, service: UserServiceDep) -> UserCreated:
    """
    Register a user.

    - **email**: Required; must not belong to another active user (case-insensitive).
    - **firstName**: Required.
    - **lastName**: Required.
    """
    return await service.register(payload)


@router.post(
    "/{user_id:int}/marker",
    response_model=MarkerResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record Marker Event",
    description="Record that a user reached a marker. Requires a bearer token.",
    responses={
        201: {"description": "Marker event recorded"},
        401: {"description": "Missing or invalid bearer token"},
        404: {"description": "Unknown user or marker"},
    },
)
async def record_marker(
    user_id: int,
    event: MarkerEventCreate,
    service: UserServiceDep,
    token: TokenDep,
) -> MarkerResponse:
    """
    Record a marker event and return the user's updated progress.

    - **markerId**: Key of the reached marker.
    - **timestamp**: Optional event time; defaults to now.
    """
    return await service.record_marker(user_id, event)
