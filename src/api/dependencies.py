"""FastAPI dependencies for injection."""
from core.auth import get_token_verifier, require_api_token
from core.config import get_settings
from db.session import get_async_session
from services.sanitizer import get_sanitizer


__all__ = [
    "get_async_session",
    "get_sanitizer",
    "get_settings",
    "get_token_verifier",
    "require_api_token",
]
