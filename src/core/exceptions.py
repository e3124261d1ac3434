"""Exceptions raised by the bookmark service and mapped to HTTP responses in api.errors."""


class InvalidInputError(Exception):
    """
    Raised when a bookmark creation payload fails validation.

    Carries the name of the offending field so the rejection can be logged
    and reported back to the client.
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(message)


class BookmarkNotFoundError(Exception):
    """Raised when no bookmark exists for the requested id."""

    def __init__(self, bookmark_id: int | str) -> None:
        self.bookmark_id = bookmark_id
        super().__init__(f"Bookmark with id {bookmark_id} not found")


class UnauthorizedError(Exception):
    """Raised when a request lacks a valid bearer credential."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
