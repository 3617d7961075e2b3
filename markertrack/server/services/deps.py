"""
Service Dependencies.

Builds request-scoped services on top of the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from markertrack.core.database import build_repos, get_session
from markertrack.server.core.security import TokenData, require_token

from .markers import MarkerService
from .users import UserService


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(build_repos(session))


def get_marker_service(session: AsyncSession = Depends(get_session)) -> MarkerService:
    return MarkerService(build_repos(session))


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
MarkerServiceDep = Annotated[MarkerService, Depends(get_marker_service)]
TokenDep = Annotated[TokenData, Depends(require_token)]
