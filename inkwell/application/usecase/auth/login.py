"""Login use case."""

import logfire
from pydantic import BaseModel

from inkwell.domain.error import InvalidCredentialsError, ValidationError
from inkwell.domain.service import JWTService, PasswordService, UserService
from inkwell.domain.value import Email
from inkwell.domain.value.common import parse_value

from .signup import AuthTokenResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginUseCase:
    """Use case for exchanging email and password for a token.

    Unknown email and wrong password fail identically.
    """

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthTokenResponse:
        """Execute login flow.

        Raises:
            InvalidCredentialsError: On any credential mismatch
        """
        with logfire.span("login.execute"):
            user = None
            if request.email:
                try:
                    email = parse_value(Email, request.email)
                    user = await self.user_service.get_user_by_email(email)
                except ValidationError:
                    user = None

            ok = await self.password_service.verify_or_decoy(
                user.password_hash if user else None, request.password or ""
            )
            if not ok or user is None:
                logfire.warn("Login failed")
                raise InvalidCredentialsError()

            token = self.jwt_service.create_token(user.id)
            logfire.info("Login succeeded", user_id=str(user.id))
            return AuthTokenResponse(token=token, user_id=str(user.id))
