"""
User service.

Registration, progress lookups and marker recording. The service raises
domain errors from ``markertrack.core.errors``; the exception handlers turn
them into HTTP responses.
"""

from __future__ import annotations

from typing import List, Optional

from markertrack.core.database.base import to_utc_naive, utc_now_naive
from markertrack.core.database.entities.markers import UserMarker
from markertrack.core.database.entities.users import User, fold_email
from markertrack.core.database.utils import RepoBundle
from markertrack.core.errors import (
    DuplicateEmailError,
    MarkerNotFoundError,
    RequiredFieldError,
    UserNotFoundError,
)
from markertrack.core.logging_config import get_logger
from markertrack.core.models.io import MarkerEventCreate, MarkerResponse, UserCreate, UserCreated
from markertrack.core.monitoring import log_marker_recorded, log_user_registered
from markertrack.server.core.config import TokenConfig
from markertrack.server.core.security import create_access_token

from .progress import build_leaderboard, build_marker_response

logger = get_logger(__name__)


def check_required(field: str, value: Optional[str]) -> str:
    """Return ``value`` or raise ``RequiredFieldError`` if it is missing or blank."""
    if value is None or not value.strip():
        raise RequiredFieldError(field)
    return value


class UserService:
    """Business logic behind the ``/api/user`` routes."""

    def __init__(self, repos: RepoBundle, token_config: Optional[TokenConfig] = None) -> None:
        self.repos = repos
        self.token_config = token_config

    async def list_progress(self) -> List[MarkerResponse]:
        """Ranked progress of every active user."""
        users = await self.repos.users.list_active_with_markers()
        logger.debug(f"Building leaderboard for {len(users)} active users")
        return build_leaderboard(users)

    async def get_progress(self, user_id: int) -> MarkerResponse:
        """Progress of one active user.

        Raises:
            UserNotFoundError: no active user has ``user_id``
        """
        user = await self.repos.users.get_active_with_markers(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return build_marker_response(user)

    async def register(self, payload: UserCreate) -> UserCreated:
        """Register a user and issue their token.

        Required fields are checked in the order Email, First Name, Last Name,
        then the email must not belong to another active user (ignoring case).

        Raises:
            RequiredFieldError: a field is missing or blank
            DuplicateEmailError: an active user already has this email
        """
        email = check_required("Email", payload.email)
        first_name = check_required("First Name", payload.first_name)
        last_name = check_required("Last Name", payload.last_name)

        if await self.repos.users.find_active_by_email(email) is not None:
            raise DuplicateEmailError(email)

        token = create_access_token(email, config=self.token_config)
        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            email_normalized=fold_email(email),
            registration_date=utc_now_naive(),
            token=token,
            is_active=True,
        )
        user = await self.repos.users.create(user)

        logger.info(f"Registered user {user.id}")
        log_user_registered(user.id, email)
        return UserCreated(id=user.id, token=user.token)

    async def record_marker(self, user_id: int, event: MarkerEventCreate) -> MarkerResponse:
        """Record that an active user reached a marker and return their updated progress.

        Raises:
            UserNotFoundError: no active user has ``user_id``
            MarkerNotFoundError: no marker has the given key
        """
        user = await self.repos.users.get_active_with_markers(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        marker = await self.repos.markers.get_by_key(event.marker_id)
        if marker is None:
            raise MarkerNotFoundError(event.marker_id)

        date_time = to_utc_naive(event.timestamp) if event.timestamp else utc_now_naive()
        await self.repos.user_markers.create(UserMarker(user_id=user.id, marker_id=marker.id, date_time=date_time))

        user = await self.repos.users.get_active_with_markers(user_id)
        response = build_marker_response(user)
        logger.info(f"User {user_id} reached marker '{marker.key}'")
        log_marker_recorded(user_id, marker.key, len(response.markers))
        return response
