"""Unit tests for avatar use cases."""

from uuid import uuid4

from dishka import AsyncContainer
import pytest

from inkwell.application.usecase.account import (
    SelectAvatarRequest,
    SelectAvatarUseCase,
    UploadAvatarRequest,
    UploadAvatarUseCase,
)
from inkwell.domain.error import (
    AvatarNotUploadedError,
    NoFileUploadedError,
    UnsupportedMediaTypeError,
    UserNotFoundError,
    ValidationError,
)
from inkwell.domain.service import MediaStorage, UserService
from inkwell.domain.value import UserId
from tests.factories import make_upload, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUploadAvatarUseCase:
    """Tests for UploadAvatarUseCase."""

    @pytest.mark.asyncio
    async def test_upload_appends_and_activates(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        storage = await unit_env.get(MediaStorage)
        upload_avatar = await unit_env.get(UploadAvatarUseCase)
        user = await user_service.register(make_user())

        # Act
        response = await upload_avatar.execute(
            UploadAvatarRequest(user_id=user.id, upload=make_upload(b"png-bytes"))
        )

        # Assert
        assert response.message == "Avatar uploaded successfully"
        assert response.avatar.startswith(f"/uploads/avatar_{user.id}_")
        assert response.avatars == [response.avatar]
        name = response.avatar.removeprefix("/uploads/")
        assert storage.files[name] == b"png-bytes"

    @pytest.mark.asyncio
    async def test_missing_file(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        upload_avatar = await unit_env.get(UploadAvatarUseCase)
        user = await user_service.register(make_user())

        with pytest.raises(NoFileUploadedError, match="No file uploaded"):
            await upload_avatar.execute(UploadAvatarRequest(user_id=user.id))

    @pytest.mark.asyncio
    async def test_disallowed_type_leaves_user_unchanged(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        user_service = await unit_env.get(UserService)
        upload_avatar = await unit_env.get(UploadAvatarUseCase)
        user = await user_service.register(make_user())
        upload = make_upload(b"GIF89a", filename="anim.svg", content_type="image/svg+xml")

        # Act
        with pytest.raises(UnsupportedMediaTypeError):
            await upload_avatar.execute(UploadAvatarRequest(user_id=user.id, upload=upload))

        # Assert
        unchanged = await user_service.get_by_id(user.id)
        assert unchanged.avatars == []
        assert unchanged.avatar == ""

    @pytest.mark.asyncio
    async def test_stored_file_is_discarded_when_user_is_gone(
        self, unit_env: AsyncContainer
    ):
        storage = await unit_env.get(MediaStorage)
        upload_avatar = await unit_env.get(UploadAvatarUseCase)

        with pytest.raises(UserNotFoundError):
            await upload_avatar.execute(
                UploadAvatarRequest(user_id=UserId(uuid4()), upload=make_upload())
            )

        assert storage.files == {}


class TestSelectAvatarUseCase:
    """Tests for SelectAvatarUseCase."""

    @pytest.mark.asyncio
    async def test_select_previous_upload(self, unit_env: AsyncContainer):
        # Arrange
        user_service = await unit_env.get(UserService)
        select_avatar = await unit_env.get(SelectAvatarUseCase)
        user = await user_service.register(make_user())
        await user_service.add_avatar(user.id, "/uploads/first.png")
        await user_service.add_avatar(user.id, "/uploads/second.png")

        # Act
        response = await select_avatar.execute(
            SelectAvatarRequest(user_id=user.id, avatar="/uploads/first.png")
        )

        # Assert
        assert response.message == "Avatar updated successfully"
        assert response.avatar == "/uploads/first.png"
        updated = await user_service.get_by_id(user.id)
        assert updated.avatar == "/uploads/first.png"
        assert updated.avatars == ["/uploads/first.png", "/uploads/second.png"]

    @pytest.mark.asyncio
    async def test_foreign_avatar_is_rejected(self, unit_env: AsyncContainer):
        """Selecting a path the user never uploaded leaves the avatar alone."""
        # Arrange
        user_service = await unit_env.get(UserService)
        select_avatar = await unit_env.get(SelectAvatarUseCase)
        user = await user_service.register(make_user())
        await user_service.add_avatar(user.id, "/uploads/mine.png")

        # Act
        with pytest.raises(AvatarNotUploadedError):
            await select_avatar.execute(
                SelectAvatarRequest(user_id=user.id, avatar="/uploads/someone-else.png")
            )

        # Assert
        unchanged = await user_service.get_by_id(user.id)
        assert unchanged.avatar == "/uploads/mine.png"

    @pytest.mark.asyncio
    async def test_avatar_required(self, unit_env: AsyncContainer):
        user_service = await unit_env.get(UserService)
        select_avatar = await unit_env.get(SelectAvatarUseCase)
        user = await user_service.register(make_user())

        with pytest.raises(ValidationError, match="Avatar not provided"):
            await select_avatar.execute(SelectAvatarRequest(user_id=user.id))
