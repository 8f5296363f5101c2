"""Service layer for bookmark CRUD operations with per-owner access control."""
import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkCreate, BookmarkUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessDenied:
    """
    Result returned when an edit or delete targets a bookmark the caller can't touch.

    Covers both a bookmark that doesn't exist and one owned by another user;
    the two cases are deliberately indistinguishable.
    """

    bookmark_id: int
    message: str = "Access to resource denied"


async def create_bookmark(
    db: AsyncSession,
    user_id: int,
    data: BookmarkCreate,
) -> Bookmark:
    """
    Create a new bookmark owned by `user_id`.

    The owner comes from the authenticated caller, never from the request body.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        user_id=user_id,
        title=data.title,
        link=data.link,
        description=data.description,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def get_bookmarks(db: AsyncSession, user_id: int) -> list[Bookmark]:
    """Get all bookmarks for a user, in the store's native order."""
    result = await db.execute(
        select(Bookmark).where(Bookmark.user_id == user_id),
    )
    return list(result.scalars().all())


async def get_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark | None:
    """Get a bookmark by ID, scoped to user. Returns None if not found or wrong user."""
    result = await db.execute(
        select(Bookmark).where(
            Bookmark.id == bookmark_id,
            Bookmark.user_id == user_id,
        ),
    )
    return result.scalar_one_or_none()


async def _get_owned_for_write(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> Bookmark | AccessDenied:
    """
    Look up a bookmark by ID alone, then check its owner.

    Missing and foreign bookmarks both come back as AccessDenied.
    """
    bookmark = await db.get(Bookmark, bookmark_id)
    if bookmark is None or bookmark.user_id != user_id:
        logger.warning(
            "User %s denied write access to bookmark %s", user_id, bookmark_id,
        )
        return AccessDenied(bookmark_id=bookmark_id)
    return bookmark


async def update_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
    data: BookmarkUpdate,
) -> Bookmark | AccessDenied:
    """
    Apply a partial update to a bookmark the user owns.

    Only fields explicitly set on `data` change. Returns AccessDenied if the
    bookmark doesn't exist or belongs to someone else.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await _get_owned_for_write(db, user_id, bookmark_id)
    if isinstance(bookmark, AccessDenied):
        return bookmark

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(bookmark, field, value)

    await db.flush()
    await db.refresh(bookmark)
    return bookmark


async def delete_bookmark(
    db: AsyncSession,
    user_id: int,
    bookmark_id: int,
) -> AccessDenied | None:
    """
    Permanently delete a bookmark the user owns.

    Returns None on success, AccessDenied if the bookmark doesn't exist or
    belongs to someone else.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = await _get_owned_for_write(db, user_id, bookmark_id)
    if isinstance(bookmark, AccessDenied):
        return bookmark

    await db.delete(bookmark)
    await db.flush()
    return None
