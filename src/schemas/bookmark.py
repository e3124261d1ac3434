"""Pydantic schemas and validation for bookmark endpoints."""
import logging
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from core.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

MIN_RATING = 0
MAX_RATING = 5

_http_url_adapter = TypeAdapter(HttpUrl)

# Client-facing rejection messages, keyed by the field that failed
INVALID_FIELD_MESSAGES: dict[str, str] = {
    "title": "Invalid data, 'title' is required",
    "url": "Invalid data, 'url' must be a complete URL (e.g. https://example.com)",
    "rating": f"Invalid data, 'rating' must be an integer from {MIN_RATING} to {MAX_RATING}",
    "description": "Invalid data, 'description' must be a string",
}


class BookmarkCreate(BaseModel):
    """
    Validated input for creating a bookmark.

    Only produced by validate_bookmark(). Unknown fields (including a
    client-supplied `id`) are dropped; the database assigns the id.
    Field order matters: the first failing field is the one reported.
    """

    model_config = ConfigDict(extra="ignore")

    title: str
    # Stored exactly as the client sent it; HttpUrl is only used as a check
    url: str
    rating: int = Field(ge=MIN_RATING, le=MAX_RATING)
    description: str = ""

    @field_validator("title")
    @classmethod
    def check_title_not_blank(cls, v: str) -> str:
        """Reject empty or whitespace-only titles."""
        if not v.strip():
            raise ValueError("title must not be empty")
        return v

    @field_validator("url")
    @classmethod
    def check_web_url(cls, v: str) -> str:
        """Require an absolute http(s) URL with a host."""
        try:
            _http_url_adapter.validate_python(v)
        except ValidationError as e:
            raise ValueError(f"not a complete web URL: {e.errors()[0]['msg']}") from e
        return v

    @field_validator("rating", mode="before")
    @classmethod
    def check_rating_is_integer(cls, v: Any) -> Any:
        """Accept ints and integer-valued floats; reject bools, strings and fractions."""
        if isinstance(v, bool) or not isinstance(v, int | float):
            raise ValueError("rating must be a number")
        if isinstance(v, float):
            if not v.is_integer():
                raise ValueError("rating must be a whole number")
            return int(v)
        return v

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v: Any) -> Any:
        """Treat an explicit null description as empty."""
        if v is None:
            return ""
        return v


class BookmarkResponse(BaseModel):
    """Schema for bookmark responses (after sanitization)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str
    description: str
    rating: int


def validate_bookmark(payload: Any) -> BookmarkCreate:
    """
    Validate a raw creation payload.

    Returns:
        The accepted, normalized BookmarkCreate.

    Raises:
        InvalidInputError: On the first field that fails validation. The
            rejection is logged before raising.
    """
    if not isinstance(payload, dict):
        logger.warning("Rejected bookmark: body is %s, not an object", type(payload).__name__)
        raise InvalidInputError("body", "Invalid data, request body must be a JSON object")

    if "id" in payload:
        logger.warning("Ignoring client-supplied id %r on bookmark create", payload["id"])

    try:
        return BookmarkCreate.model_validate(payload)
    except ValidationError as e:
        error = e.errors()[0]
        field = str(error["loc"][0]) if error["loc"] else "body"
        logger.warning("Rejected bookmark: invalid '%s' (%s)", field, error["msg"])
        raise InvalidInputError(
            field, INVALID_FIELD_MESSAGES.get(field, "Invalid data"),
        ) from e
