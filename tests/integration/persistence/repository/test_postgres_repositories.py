"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL. Run with
``INKWELL_INTEGRATION=1 pytest -m integration``.
"""

import os
from uuid import uuid4

import pytest

from inkwell.domain.error import EmailAlreadyRegisteredError
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.value import Email, Preferences, UserId
from tests.factories import make_post, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("INKWELL_INTEGRATION") != "1",
        reason="set INKWELL_INTEGRATION=1 to run against PostgreSQL",
    ),
]

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def _unique_email() -> str:
    return f"user-{uuid4().hex[:12]}@example.com"


class TestPostgresUserRepository:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_add_and_find_by_email(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = make_user(email=_unique_email())

        # Act
        await user_repo.add(user)
        found = await user_repo.find_by_email(user.email)

        # Assert
        assert found is not None
        assert found.id == user.id
        assert found.preferences == Preferences()

    @pytest.mark.asyncio
    async def test_duplicate_email_maps_to_conflict(self, integration_env):
        """The savepoint keeps the session usable after the unique violation."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        email = _unique_email()
        await user_repo.add(make_user(email=email))

        # Act
        with pytest.raises(EmailAlreadyRegisteredError):
            await user_repo.add(make_user(email=email))

        # Assert
        assert await user_repo.find_by_email(Email(email)) is not None

    @pytest.mark.asyncio
    async def test_push_avatar_and_counter_are_single_writes(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.add(make_user(email=_unique_email()))

        # Act
        await user_repo.push_avatar(user.id, "/uploads/a.png")
        updated = await user_repo.push_avatar(user.id, "/uploads/b.png")
        await user_repo.increment_post_count(user.id)
        stats = await user_repo.increment_post_count(user.id)

        # Assert
        assert updated.avatars == ["/uploads/a.png", "/uploads/b.png"]
        assert updated.avatar == "/uploads/b.png"
        assert stats.posts == 2

    @pytest.mark.asyncio
    async def test_replace_preferences_round_trips_jsonb(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.add(make_user(email=_unique_email()))

        updated = await user_repo.replace_preferences(user.id, Preferences(dark_mode=True))

        assert updated.preferences.dark_mode is True
        assert (await user_repo.find_by_id(user.id)).preferences.dark_mode is True

    @pytest.mark.asyncio
    async def test_missing_user_updates_return_none(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        missing = UserId(uuid4())

        assert await user_repo.set_avatar(missing, "/uploads/a.png") is None
        assert await user_repo.increment_post_count(missing) is None
        assert await user_repo.delete(missing) is False


class TestPostgresPostRepository:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_add_find_and_count(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        author = UserId(uuid4())
        older = make_post(author, title="Older", minutes_ago=5, tags=["a"])
        newer = make_post(author, title="Newer", minutes_ago=1)

        # Act
        await post_repo.add(older)
        await post_repo.add(newer)

        # Assert
        assert await post_repo.count_by_author(author) == 2
        assert (await post_repo.find_by_id(older.id)).tags == ["a"]
        titles = [p.title for p in await post_repo.find_all() if p.author_id == author]
        assert titles == ["Newer", "Older"]
