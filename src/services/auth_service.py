"""Service layer for user registration and signin."""
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings
from core.security import create_access_token, hash_password, verify_password
from models.user import User
from schemas.auth import AuthCredentials
from services.exceptions import CredentialsTakenError, InvalidCredentialsError

logger = logging.getLogger(__name__)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    """Get a user by email address."""
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def signup(
    db: AsyncSession,
    credentials: AuthCredentials,
    settings: Settings,
) -> str:
    """
    Register a new user and return an access token for them.

    Raises:
        CredentialsTakenError: If the email is already registered.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    if await get_user_by_email(db, credentials.email) is not None:
        raise CredentialsTakenError(credentials.email)

    user = User(email=credentials.email, hash=hash_password(credentials.password))
    db.add(user)
    await db.flush()
    logger.info("Registered user %s", user.id)
    return create_access_token(user.id, user.email, settings)


async def signin(
    db: AsyncSession,
    credentials: AuthCredentials,
    settings: Settings,
) -> str:
    """
    Verify a user's credentials and return an access token.

    Raises:
        InvalidCredentialsError: If the email is unknown or the password is wrong.
    """
    user = await get_user_by_email(db, credentials.email)
    if user is None or not verify_password(credentials.password, user.hash):
        logger.info("Failed signin attempt")
        raise InvalidCredentialsError()
    return create_access_token(user.id, user.email, settings)
