"""Request authentication use case (the auth gate)."""

from uuid import UUID

import logfire
from pydantic import BaseModel, ConfigDict

from inkwell.domain.error import (
    AuthenticationRequiredError,
    InvalidTokenError,
    UnknownAccountError,
)
from inkwell.domain.service import JWTService, UserService
from inkwell.domain.value import UserId
from inkwell.util.jwt import JWTError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


class AuthenticateRequest(BaseModel):
    """Raw credentials presented by a request."""

    authorization: str | None = None


class AuthContext(BaseModel):
    """Identity of the authenticated caller, handed to protected handlers."""

    model_config = ConfigDict(frozen=True)

    user_id: UserId
    email: str
    username: str


class AuthenticateUseCase:
    """Resolve a bearer token to a live user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize authenticate use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: AuthenticateRequest) -> AuthContext:
        """Authenticate a request.

        Steps:
        1. Extract the bearer token from the Authorization header
        2. Verify signature and expiry
        3. Load the user named by the token subject

        Raises:
            AuthenticationRequiredError: If no bearer token was presented
            InvalidTokenError: If the token fails verification
            UnknownAccountError: If the subject does not resolve to a user
        """
        token = bearer_token(request.authorization)
        if token is None:
            raise AuthenticationRequiredError()

        try:
            payload = self.jwt_service.verify_token(token)
        except JWTError as e:
            raise InvalidTokenError() from e

        try:
            user_id = UserId(UUID(payload.sub))
        except ValueError as e:
            logfire.warn("Token subject is not a user id", subject=payload.sub)
            raise UnknownAccountError(payload.sub) from e

        user = await self.user_service.get_user_by_id(user_id)
        if user is None:
            logfire.warn("Token subject no longer exists", user_id=str(user_id))
            raise UnknownAccountError(payload.sub)

        return AuthContext(
            user_id=user.id, email=user.email.root, username=user.username.root
        )
