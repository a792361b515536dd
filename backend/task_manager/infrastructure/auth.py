"""Bearer Authentication — resolves the caller identity from a signed JWT.

Invariants:
    - Identity is the token's `sub` claim (the caller's email)
    - Missing, malformed, expired, or wrongly-signed tokens raise AuthenticationError
    - Tokens are verified with settings.jwt_secret / settings.jwt_algorithm

Design Decisions:
    - Token issuance belongs to the identity provider; create_access_token exists
      for local tooling and tests that need a valid credential
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from task_manager.config import Settings, get_settings
from task_manager.core.domain_types import Identity
from task_manager.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def create_access_token(
    identity: str,
    settings: Settings | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a JWT whose subject is the given identity."""
    settings = settings or get_settings()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_expire_minutes)
    )
    return jwt.encode(
        {"sub": identity, "exp": expire},
        settings.jwt_secret, algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str, settings: Settings | None = None) -> Identity:
    """Verify a JWT and return the identity it was issued to."""
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm],
        )
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Access token expired")
    except jwt.InvalidTokenError as e:
        logger.warning(f"Rejected access token: {e}")
        raise AuthenticationError("Invalid access token")

    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        raise AuthenticationError("Access token has no subject")
    return Identity(subject)


async def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """FastAPI dependency — authenticated caller identity or 401."""
    if credentials is None:
        raise AuthenticationError()
    return decode_access_token(credentials.credentials, settings)
