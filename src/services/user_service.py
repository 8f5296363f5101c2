"""Service layer for user profile updates."""
from sqlalchemy.ext.asyncio import AsyncSession

from models.user import User
from schemas.user import UserUpdate
from services.auth_service import get_user_by_email
from services.exceptions import CredentialsTakenError


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    """
    Apply a partial update to the user's own profile.

    Raises:
        CredentialsTakenError: If the new email belongs to another user.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    update_data = data.model_dump(exclude_unset=True)

    new_email = update_data.get("email")
    if new_email is not None and new_email != user.email:
        existing = await get_user_by_email(db, new_email)
        if existing is not None and existing.id != user.id:
            raise CredentialsTakenError(new_email)

    for field, value in update_data.items():
        setattr(user, field, value)

    await db.flush()
    await db.refresh(user)
    return user
