"""Unit tests for AuthenticateUseCase."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from dishka import AsyncContainer
import pytest

from inkwell.application.usecase.auth import AuthenticateRequest, AuthenticateUseCase
from inkwell.application.usecase.auth.authenticate import bearer_token
from inkwell.config import AuthSettings
from inkwell.domain.error import (
    AuthenticationRequiredError,
    InvalidTokenError,
    UnknownAccountError,
)
from inkwell.domain.service import JWTService, UserService
from inkwell.domain.value import UserId
from inkwell.util.jwt import create_token
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestBearerToken:
    """Tests for bearer_token()."""

    @pytest.mark.parametrize(
        "header,expected",
        [
            ("Bearer abc", "abc"),
            ("bearer abc", "abc"),
            ("Bearer", None),
            ("Basic abc", None),
            ("Bearer a b", None),
            ("", None),
            (None, None),
        ],
    )
    def test_extracts_token(self, header, expected):
        assert bearer_token(header) == expected


class TestAuthenticateUseCase:
    """Tests for AuthenticateUseCase."""

    @pytest.mark.asyncio
    async def test_valid_token_resolves_user(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        user = await user_service.register(make_user(email="ada@example.com"))
        token = jwt_service.create_token(user.id)

        # Act
        context = await authenticate.execute(
            AuthenticateRequest(authorization=f"Bearer {token}")
        )

        # Assert
        assert context.user_id == user.id
        assert context.email == "ada@example.com"
        assert context.username == "ada"

    @pytest.mark.asyncio
    async def test_missing_header_requires_authentication(
        self, unit_env: AsyncContainer
    ):
        authenticate = await unit_env.get(AuthenticateUseCase)

        with pytest.raises(AuthenticationRequiredError, match="Authentication required"):
            await authenticate.execute(AuthenticateRequest())

    @pytest.mark.asyncio
    async def test_expired_token_is_invalid(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        user = await user_service.register(make_user())
        token = jwt_service.create_token(
            user.id, issued_at=datetime.now(timezone.utc) - timedelta(hours=25)
        )

        # Act / Assert
        with pytest.raises(InvalidTokenError, match="Invalid or expired token"):
            await authenticate.execute(
                AuthenticateRequest(authorization=f"Bearer {token}")
            )

    @pytest.mark.asyncio
    async def test_token_signed_with_other_key_is_invalid(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        user_service = await unit_env.get(UserService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        user = await user_service.register(make_user())
        foreign = JWTService(
            AuthSettings(jwt_secret="some-other-deployment-key-0123456789ab")
        )
        token = foreign.create_token(user.id)

        # Act / Assert
        with pytest.raises(InvalidTokenError):
            await authenticate.execute(
                AuthenticateRequest(authorization=f"Bearer {token}")
            )

    @pytest.mark.asyncio
    async def test_deleted_user_is_unknown(self, unit_env: AsyncContainer):
        """A still-valid token for a deleted account should be refused."""
        # Arrange
        user_service = await unit_env.get(UserService)
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        user = await user_service.register(make_user())
        token = jwt_service.create_token(user.id)
        await user_service.delete(user.id)

        # Act / Assert
        with pytest.raises(UnknownAccountError, match="User not found"):
            await authenticate.execute(
                AuthenticateRequest(authorization=f"Bearer {token}")
            )

    @pytest.mark.asyncio
    async def test_never_existing_user_is_unknown(self, unit_env: AsyncContainer):
        jwt_service = await unit_env.get(JWTService)
        authenticate = await unit_env.get(AuthenticateUseCase)
        token = jwt_service.create_token(UserId(uuid4()))

        with pytest.raises(UnknownAccountError):
            await authenticate.execute(
                AuthenticateRequest(authorization=f"Bearer {token}")
            )

    @pytest.mark.asyncio
    async def test_non_uuid_subject_is_unknown(self, unit_env: AsyncContainer):
        auth_settings = await unit_env.get(AuthSettings)
        authenticate = await unit_env.get(AuthenticateUseCase)
        token = create_token("not-a-user-id", auth_settings)

        with pytest.raises(UnknownAccountError):
            await authenticate.execute(
                AuthenticateRequest(authorization=f"Bearer {token}")
            )
