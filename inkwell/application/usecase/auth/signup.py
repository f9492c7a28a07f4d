"""Signup use case."""

from uuid import uuid4

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.error import EmailAlreadyRegisteredError, ValidationError, WeakPasswordError
from inkwell.domain.model import User
from inkwell.domain.service import JWTService, PasswordService, UserService
from inkwell.domain.value import Email, UserId, Username, is_strong_password
from inkwell.domain.value.common import parse_value
from inkwell.domain.value.types import PASSWORD_POLICY_MESSAGE


class SignupRequest(BaseModel):
    """Signup request; fields are optional so presence is checked here."""

    email: str | None = None
    username: str | None = None
    password: str | None = None


class AuthTokenResponse(ResponseModel):
    """Token issued after signup or login."""

    token: str
    user_id: str


class SignupUseCase:
    """Use case for registering a new account."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize signup use case.

        Args:
            user_service: User domain service
            password_service: Password hashing service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service

    async def execute(self, request: SignupRequest) -> AuthTokenResponse:
        """Execute signup flow.

        Steps:
        1. Require email, username and password
        2. Check the password strength policy
        3. Normalize email and reject an existing account
        4. Hash the password and create the user
        5. Issue a token for the new user

        Raises:
            ValidationError: If a field is missing or malformed
            WeakPasswordError: If the password fails the policy
            EmailAlreadyRegisteredError: If the email is taken
        """
        if not request.email or not request.username or not request.password:
            raise ValidationError("All fields are required")

        if not is_strong_password(request.password):
            raise WeakPasswordError(PASSWORD_POLICY_MESSAGE)

        email = parse_value(Email, request.email)
        username = parse_value(Username, request.username)

        with logfire.span("signup.execute", username=username.root):
            # Read-then-write; the unique index on email catches the race
            if await self.user_service.get_user_by_email(email):
                logfire.warn("Signup with registered email")
                raise EmailAlreadyRegisteredError(email.root)

            digest = await self.password_service.hash(request.password)
            user = await self.user_service.register(
                User(
                    id=UserId(uuid4()),
                    email=email,
                    username=username,
                    password_hash=digest,
                )
            )

            token = self.jwt_service.create_token(user.id)
            return AuthTokenResponse(token=token, user_id=str(user.id))
