"""
Service layer for bookmark persistence.

Thin queries over the bookmarks table. Nothing here commits; the request's
session generator commits at request end. Storage errors propagate.
"""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from models.bookmark import MAX_BOOKMARK_ID, Bookmark
from schemas.bookmark import BookmarkCreate

logger = logging.getLogger(__name__)


async def list_bookmarks(db: AsyncSession) -> list[Bookmark]:
    """Get all bookmarks in storage order."""
    result = await db.execute(select(Bookmark).order_by(Bookmark.id))
    return list(result.scalars().all())


def _is_storable_id(bookmark_id: int) -> bool:
    """True if bookmark_id fits the primary key column (ids start at 1)."""
    return 1 <= bookmark_id <= MAX_BOOKMARK_ID


async def get_bookmark(db: AsyncSession, bookmark_id: int) -> Bookmark | None:
    """Get a bookmark by ID. Returns None if it doesn't exist."""
    # Out-of-range ids can't match a row, and some drivers reject them outright
    if not _is_storable_id(bookmark_id):
        return None
    result = await db.execute(select(Bookmark).where(Bookmark.id == bookmark_id))
    return result.scalar_one_or_none()


async def create_bookmark(db: AsyncSession, data: BookmarkCreate) -> Bookmark:
    """
    Insert a new bookmark and return it with its database-assigned id.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    bookmark = Bookmark(
        title=data.title,
        url=data.url,
        description=data.description,
        rating=data.rating,
    )
    db.add(bookmark)
    await db.flush()
    await db.refresh(bookmark)
    logger.info("Bookmark with id %s created", bookmark.id)
    return bookmark


async def delete_bookmark(db: AsyncSession, bookmark_id: int) -> None:
    """
    Delete a bookmark by ID. Deleting a missing bookmark is a no-op.

    Note: Does not commit. Caller (session generator) handles commit at request end.
    """
    if not _is_storable_id(bookmark_id):
        logger.info("Bookmark id %s out of range, nothing to delete", bookmark_id)
        return
    await db.execute(delete(Bookmark).where(Bookmark.id == bookmark_id))
    logger.info("Bookmark with id %s deleted", bookmark_id)
