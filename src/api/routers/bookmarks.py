"""Bookmark CRUD endpoints."""
from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_current_user
from models.user import User
from schemas.bookmark import BookmarkCreate, BookmarkResponse, BookmarkUpdate
from services import bookmark_service
from services.bookmark_service import AccessDenied

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])

# Largest value the integer primary key column can hold
MAX_BOOKMARK_ID = 2_147_483_647


def _forbidden(denied: AccessDenied) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=denied.message)


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    data: BookmarkCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Create a new bookmark owned by the current user."""
    bookmark = await bookmark_service.create_bookmark(db, current_user.id, data)
    return BookmarkResponse.model_validate(bookmark)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> list[BookmarkResponse]:
    """List all bookmarks for the current user."""
    bookmarks = await bookmark_service.get_bookmarks(db, current_user.id)
    return [BookmarkResponse.model_validate(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse | None)
async def get_bookmark(
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse | None:
    """
    Get a single bookmark by ID.

    Responds 200 with `null` when the bookmark doesn't exist or isn't owned by
    the current user, so other users' bookmarks stay invisible.
    """
    bookmark = await bookmark_service.get_bookmark(db, current_user.id, bookmark_id)
    if bookmark is None:
        return None
    return BookmarkResponse.model_validate(bookmark)


@router.patch("/{bookmark_id}", response_model=BookmarkResponse)
async def update_bookmark(
    data: BookmarkUpdate,
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> BookmarkResponse:
    """Update a bookmark. Responds 403 if it doesn't exist or isn't yours."""
    result = await bookmark_service.update_bookmark(
        db, current_user.id, bookmark_id, data,
    )
    if isinstance(result, AccessDenied):
        raise _forbidden(result)
    return BookmarkResponse.model_validate(result)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int = Path(ge=1, le=MAX_BOOKMARK_ID),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_async_session),
) -> Response:
    """Delete a bookmark. Responds 403 if it doesn't exist or isn't yours."""
    result = await bookmark_service.delete_bookmark(db, current_user.id, bookmark_id)
    if isinstance(result, AccessDenied):
        raise _forbidden(result)
    return Response(status_code=204)
