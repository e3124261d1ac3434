"""Bookmark CRUD endpoints."""
import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import get_async_session, get_sanitizer, require_api_token
from core.exceptions import BookmarkNotFoundError, InvalidInputError
from schemas.bookmark import BookmarkResponse, validate_bookmark
from services import bookmark_service
from services.sanitizer import BookmarkSanitizer

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookmarks",
    tags=["bookmarks"],
    dependencies=[Depends(require_api_token)],
)


@router.get("", response_model=list[BookmarkResponse])
async def list_bookmarks(
    db: AsyncSession = Depends(get_async_session),
    sanitizer: BookmarkSanitizer = Depends(get_sanitizer),
) -> list[BookmarkResponse]:
    """List all bookmarks."""
    bookmarks = await bookmark_service.list_bookmarks(db)
    return [sanitizer.sanitize(b) for b in bookmarks]


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
async def get_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
    sanitizer: BookmarkSanitizer = Depends(get_sanitizer),
) -> BookmarkResponse:
    """Get a single bookmark by ID."""
    bookmark = await bookmark_service.get_bookmark(db, bookmark_id)
    if bookmark is None:
        logger.warning("Bookmark with id %s not found", bookmark_id)
        raise BookmarkNotFoundError(bookmark_id)
    return sanitizer.sanitize(bookmark)


@router.post("", response_model=BookmarkResponse, status_code=201)
async def create_bookmark(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_async_session),
    sanitizer: BookmarkSanitizer = Depends(get_sanitizer),
) -> BookmarkResponse:
    """
    Create a new bookmark.

    The body is read here rather than declared as a parameter so that the
    auth check always runs first, even for malformed bodies. Responds with a
    Location header pointing at the new resource.
    """
    try:
        payload = await request.json()
    except ValueError as e:
        logger.warning("Rejected bookmark: body is not valid JSON (%s)", e)
        raise InvalidInputError("body", "Invalid data, request body must be JSON") from e

    data = validate_bookmark(payload)
    bookmark = await bookmark_service.create_bookmark(db, data)
    response.headers["Location"] = f"{router.prefix}/{bookmark.id}"
    return sanitizer.sanitize(bookmark)


@router.delete("/{bookmark_id}", status_code=204)
async def delete_bookmark(
    bookmark_id: int,
    db: AsyncSession = Depends(get_async_session),
) -> None:
    """Delete a bookmark. Succeeds whether or not the bookmark existed."""
    await bookmark_service.delete_bookmark(db, bookmark_id)
