"""Unit tests for PasswordService."""

from dishka import AsyncContainer
import pytest

from inkwell.domain.service import PasswordService
from tests.factories import STRONG_PASSWORD
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestPasswordService:
    """Tests for PasswordService."""

    @pytest.mark.asyncio
    async def test_hash_then_verify(self, unit_env: AsyncContainer):
        password_service = await unit_env.get(PasswordService)

        digest = await password_service.hash(STRONG_PASSWORD)

        assert digest != STRONG_PASSWORD
        assert await password_service.verify(digest, STRONG_PASSWORD) is True
        assert await password_service.verify(digest, "Other1234567!") is False

    @pytest.mark.asyncio
    async def test_verify_or_decoy_with_digest(self, unit_env: AsyncContainer):
        password_service = await unit_env.get(PasswordService)
        digest = await password_service.hash(STRONG_PASSWORD)

        assert await password_service.verify_or_decoy(digest, STRONG_PASSWORD) is True

    @pytest.mark.asyncio
    async def test_verify_or_decoy_without_digest_is_false(
        self, unit_env: AsyncContainer
    ):
        """No account means no match, whatever the password."""
        password_service = await unit_env.get(PasswordService)

        assert await password_service.verify_or_decoy(None, STRONG_PASSWORD) is False
        assert await password_service.verify_or_decoy(None, "") is False
