"""
Bearer token authentication.

Tokens are HS256 JWTs carrying a userId claim; a token is only honoured while
a matching Session row exists, so signing out revokes it.
"""

from __future__ import annotations

from typing import Mapping, Optional

import jwt

from utils.error_handling import UnauthorizedError
from utils.logging_config import get_logger
from utils.secrets import get_secret_string
from utils.settings import RuntimeSettings

logger = get_logger(__name__)

KEYWORD = "Bearer"


def extract_bearer_token(headers: Optional[Mapping[str, str]]) -> str:
    """Pull the token out of an Authorization header (case-insensitive name)."""
    headers = headers or {}
    auth_header = next(
        (value for key, value in headers.items() if key.lower() == "authorization"),
        None,
    )
    if not auth_header:
        raise UnauthorizedError("Authorization header missing")

    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != KEYWORD.lower():
        raise UnauthorizedError("Invalid authorization header format")
    return parts[1]


class AuthService:
    """Resolves an authenticated user id from request headers."""

    def __init__(self, session_repo, settings: Optional[RuntimeSettings] = None):
        self.session_repo = session_repo
        self.settings = settings or RuntimeSettings.from_environment()
        self._signing_key: Optional[str] = None

    def signing_key(self) -> Optional[str]:
        """JWT_SECRET wins for local runs; deployed functions read JWT_SECRET_ARN once."""
        if self._signing_key is None:
            if self.settings.jwt_secret:
                self._signing_key = self.settings.jwt_secret
            elif self.settings.jwt_secret_arn:
                self._signing_key = get_secret_string(self.settings.jwt_secret_arn)
        return self._signing_key

    def decode_token(self, token: str) -> int:
        key = self.signing_key()
        if not key:
            raise UnauthorizedError("JWT secret not configured")
        try:
            payload = jwt.decode(
                token,
                key,
                algorithms=[self.settings.jwt_algorithm],
            )
        except jwt.InvalidTokenError as exc:
            logger.warning("Invalid token", extra={"error": str(exc)})
            raise UnauthorizedError("Invalid token") from exc

        user_id = payload.get("userId")
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise UnauthorizedError("Token has no userId")
        return user_id

    async def authenticate(self, headers: Optional[Mapping[str, str]]) -> int:
        token = extract_bearer_token(headers)
        user_id = self.decode_token(token)

        session = await self.session_repo.find_session_by_token(token)
        if not session:
            raise UnauthorizedError("No session for token")
        return user_id
