"""
Token Security.

JWT issuance for registered users and the bearer-token dependency that
guards authenticated routes. Tokens are HS256-signed with the configured
key and carry ``sub`` (the user's email), a random ``jti``, ``iss``, ``aud``,
``iat`` and ``exp`` claims.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ValidationError

from markertrack.core.logging_config import get_logger
from markertrack.server.core.config import TokenConfig, settings

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class TokenData(BaseModel):
    """Verified claims of a bearer token."""

    sub: str
    jti: str
    iss: str
    aud: str
    iat: int
    exp: int


def create_access_token(subject: str, config: Optional[TokenConfig] = None, now: Optional[datetime] = None) -> str:
    """Issue a signed JWT for ``subject``.

    Args:
        subject: Value of the ``sub`` claim (the user's email)
        config: Token settings; defaults to the application settings
        now: Issue time; defaults to the current UTC time

    Returns:
        The encoded token
    """
    config = config or settings.token
    issued_at = now or datetime.now(timezone.utc)
    payload: Dict[str, Any] = {
        "sub": subject,
        "jti": str(uuid.uuid4()),
        "iss": config.issuer,
        "aud": config.audience,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + timedelta(days=config.expire_days)).timestamp()),
    }
    return jwt.encode(payload, config.key, algorithm=config.algorithm)


def decode_token(token: str, config: Optional[TokenConfig] = None) -> TokenData:
    """Verify a token's signature, lifetime, issuer and audience.

    Raises:
        HTTPException: 401 when the token is expired or invalid
    """
    config = config or settings.token
    try:
        payload = jwt.decode(
            token,
            config.key,
            algorithms=[config.algorithm],
            audience=config.audience,
            issuer=config.issuer,
            options={"require": ["sub", "jti", "iat", "exp", "iss", "aud"]},
        )
        return TokenData(**payload)
    except jwt.ExpiredSignatureError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token has expired",
            headers={"WWW-Authenticate": "Bearer"},
        )
    except (jwt.InvalidTokenError, ValidationError) as e:
        logger.debug(f"Rejected bearer token: {e}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )


async def require_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TokenData:
    """FastAPI dependency returning the verified claims of the request's bearer token."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return decode_token(credentials.credentials)
