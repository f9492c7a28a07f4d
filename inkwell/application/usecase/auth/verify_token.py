"""Token verification use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.error import AuthenticationRequiredError, InvalidTokenError
from inkwell.domain.service import JWTService
from inkwell.util.jwt import JWTError

from .authenticate import bearer_token


class VerifyTokenRequest(BaseModel):
    """Verify token request."""

    authorization: str | None = None


class TokenClaims(ResponseModel):
    """Decoded claims; timestamps are seconds since the epoch."""

    sub: str
    iat: int
    exp: int


class VerifyTokenResponse(ResponseModel):
    """Verify token response."""

    valid: bool
    user: TokenClaims


class VerifyTokenUseCase:
    """Check a bearer token without touching the store."""

    def __init__(self, jwt_service: JWTService) -> None:
        self.jwt_service = jwt_service

    async def execute(self, request: VerifyTokenRequest) -> VerifyTokenResponse:
        """Verify the token and echo its claims.

        Raises:
            AuthenticationRequiredError: If no bearer token was presented
            InvalidTokenError: If the token is invalid or expired
        """
        token = bearer_token(request.authorization)
        if token is None:
            raise AuthenticationRequiredError()

        try:
            payload = self.jwt_service.verify_token(token)
        except JWTError as e:
            raise InvalidTokenError() from e

        return VerifyTokenResponse(
            valid=True,
            user=TokenClaims(
                sub=payload.sub,
                iat=int(payload.iat.timestamp()),
                exp=int(payload.exp.timestamp()),
            ),
        )
