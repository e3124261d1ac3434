"""
Global exception handlers.

Maps service exceptions to HTTP responses in one place:
- InvalidInputError / RequestValidationError -> 400 plain text
- UnauthorizedError -> 401 JSON
- BookmarkNotFoundError -> 404 JSON
- SQLAlchemyError and any other unhandled error -> 500 JSON, no internal detail leaked
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import BookmarkNotFoundError, InvalidInputError, UnauthorizedError

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Bookmark doesn't exist"
UNAUTHORIZED_MESSAGE = "Unauthorized request"
SERVER_ERROR_MESSAGE = "server error"


def error_body(message: str) -> dict:
    """Build the JSON error envelope used by all JSON error responses."""
    return {"error": {"message": message}}


async def invalid_input_handler(_request: Request, exc: InvalidInputError) -> PlainTextResponse:
    """Return the validation message as plain text."""
    return PlainTextResponse(exc.message, status_code=status.HTTP_400_BAD_REQUEST)


async def request_validation_handler(
    request: Request, exc: RequestValidationError,
) -> PlainTextResponse:
    """Handle framework-level validation errors (e.g. a non-integer path id)."""
    logger.warning("Request validation failed on %s: %s", request.url.path, exc.errors())
    return PlainTextResponse("Invalid data", status_code=status.HTTP_400_BAD_REQUEST)


async def unauthorized_handler(_request: Request, _exc: UnauthorizedError) -> JSONResponse:
    """Reject with 401 and a Bearer challenge."""
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content=error_body(UNAUTHORIZED_MESSAGE),
        headers={"WWW-Authenticate": "Bearer"},
    )


async def not_found_handler(_request: Request, _exc: BookmarkNotFoundError) -> JSONResponse:
    """Return the structured 404 body."""
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_body(NOT_FOUND_MESSAGE),
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Log the failure and return a generic 500.

    Registered for SQLAlchemyError and as the catch-all for anything else
    (driver connection errors, OSError), so every 500 has the same body.
    """
    logger.error(
        "Server error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(SERVER_ERROR_MESSAGE),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(InvalidInputError, invalid_input_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(UnauthorizedError, unauthorized_handler)
    app.add_exception_handler(BookmarkNotFoundError, not_found_handler)
    app.add_exception_handler(SQLAlchemyError, storage_error_handler)
    # Starlette runs Exception handlers in ServerErrorMiddleware, which re-raises
    # after sending the response so the server still logs the traceback
    app.add_exception_handler(Exception, storage_error_handler)
