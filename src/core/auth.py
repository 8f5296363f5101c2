"""Authentication dependency resolving bearer access tokens to users."""
import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from core.security import decode_access_token
from db.session import get_async_session
from models.user import User

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_token_user_id(token: str, settings: Settings) -> int:
    """
    Validate an access token and return the user ID it was issued for.

    Raises:
        HTTPException: If token is invalid, expired, or carries a malformed subject.
    """
    try:
        payload = decode_access_token(token, settings)
    except jwt.ExpiredSignatureError:
        raise _unauthorized("Token has expired")
    except jwt.PyJWTError as e:
        raise _unauthorized(f"Invalid token: {e}")

    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        raise _unauthorized("Invalid token: malformed sub claim")


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    db: AsyncSession = Depends(get_async_session),
    settings: Settings = Depends(get_settings),
) -> User:
    """
    Dependency that validates the bearer token and returns the current user.

    Raises 401 when the token is missing, invalid, or belongs to a deleted user.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    user_id = get_token_user_id(credentials.credentials, settings)

    user = await db.get(User, user_id)
    if user is None:
        logger.info("Token presented for unknown user %s", user_id)
        raise _unauthorized("User not found")

    return user
