"""
HTML sanitization of stored bookmarks before they are returned to clients.

Titles are plain text: every tag is escaped. Descriptions may carry a small
set of benign inline markup; anything else (script tags, event-handler
attributes, javascript: links) is escaped or stripped by bleach.
"""
from typing import Protocol

from bleach.sanitizer import Cleaner

from models.bookmark import Bookmark
from schemas.bookmark import BookmarkResponse


_ALLOWED_DESCRIPTION_TAGS = {
    "a",
    "abbr",
    "b",
    "blockquote",
    "br",
    "code",
    "em",
    "i",
    "img",
    "li",
    "ol",
    "p",
    "pre",
    "s",
    "strong",
    "sub",
    "sup",
    "u",
    "ul",
}

_ALLOWED_DESCRIPTION_ATTRS = {
    "a": ["href", "title"],
    "abbr": ["title"],
    "img": ["src", "alt", "title"],
}

_ALLOWED_PROTOCOLS = ["http", "https", "mailto"]

# strip=False escapes disallowed tags instead of dropping them, so the text stays visible
_TITLE_CLEANER = Cleaner(tags=set(), attributes={}, strip=False, strip_comments=True)

_DESCRIPTION_CLEANER = Cleaner(
    tags=_ALLOWED_DESCRIPTION_TAGS,
    attributes=_ALLOWED_DESCRIPTION_ATTRS,
    protocols=_ALLOWED_PROTOCOLS,
    strip=False,
    strip_comments=True,
)


class BookmarkSanitizer(Protocol):
    """Strategy for turning a stored bookmark into a wire-safe response."""

    def sanitize(self, bookmark: Bookmark) -> BookmarkResponse:
        """Return the client-facing representation of bookmark."""
        ...


class HtmlSanitizer:
    """Default sanitizer backed by bleach. Pure and idempotent."""

    def sanitize_title(self, title: str) -> str:
        """Escape all markup in a title."""
        return _TITLE_CLEANER.clean(title)

    def sanitize_description(self, description: str) -> str:
        """Keep benign markup in a description, neutralize the rest."""
        return _DESCRIPTION_CLEANER.clean(description)

    def sanitize(self, bookmark: Bookmark) -> BookmarkResponse:
        """Sanitize free-text fields; id, url and rating pass through unchanged."""
        return BookmarkResponse(
            id=bookmark.id,
            title=self.sanitize_title(bookmark.title),
            url=bookmark.url,
            description=self.sanitize_description(bookmark.description or ""),
            rating=bookmark.rating,
        )


def get_sanitizer() -> BookmarkSanitizer:
    """Dependency that provides the response sanitizer."""
    return HtmlSanitizer()
