"""Bookmark model - the only persisted entity."""
from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from models.base import Base

# Largest id the primary key column can hold (int4 on PostgreSQL)
MAX_BOOKMARK_ID = 2**31 - 1


class Bookmark(Base):
    """Bookmark model - stores a URL with a title, description and rating."""

    __tablename__ = "bookmarks"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
