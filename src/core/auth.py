"""Bearer-token authentication against a single shared secret."""
import logging
import secrets
from typing import Protocol

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from core.config import Settings, get_settings
from core.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme; auto_error=False so we control the 401 response shape
security = HTTPBearer(auto_error=False)


class TokenVerifier(Protocol):
    """Strategy for deciding whether a bearer token is acceptable."""

    def verify(self, token: str) -> bool:
        """Return True if the token grants access."""
        ...


class SharedSecretVerifier:
    """Accepts exactly one configured token, compared in constant time."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def verify(self, token: str) -> bool:
        """Return True if token matches the configured secret."""
        # An unset secret must never match an empty credential
        if not self._secret or not token:
            return False
        return secrets.compare_digest(token.encode(), self._secret.encode())


def get_token_verifier(settings: Settings = Depends(get_settings)) -> TokenVerifier:
    """Dependency that provides the token verifier for the current settings."""
    return SharedSecretVerifier(settings.api_token)


async def require_api_token(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> None:
    """
    Dependency that rejects requests without a valid bearer token.

    Runs before any handler or database session is created, so rejected
    requests never touch storage.

    Raises:
        UnauthorizedError: If the header is missing, uses another scheme,
            or carries a token the verifier rejects.
    """
    if credentials is None:
        logger.warning(
            "Missing bearer token on %s %s", request.method, request.url.path,
        )
        raise UnauthorizedError("Missing bearer token")

    if not verifier.verify(credentials.credentials):
        logger.warning(
            "Invalid bearer token on %s %s", request.method, request.url.path,
        )
        raise UnauthorizedError("Invalid bearer token")
