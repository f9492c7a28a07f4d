"""JWT token domain service."""

from datetime import datetime

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.value import UserId
from inkwell.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations.

    Stateless: verification depends only on the token, the configured secret
    and the current time. There is no revocation list.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings holding the signing key
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: UserId, issued_at: datetime | None = None) -> str:
        """Issue a signed token for a user.

        Args:
            user_id: User ID to bind the token to
            issued_at: Issue instant (defaults to now)

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), self.auth_settings, issued_at)
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise
