"""Upload avatar use case."""

import logfire
from pydantic import BaseModel, InstanceOf

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.service import MediaService, MediaUpload, UserService
from inkwell.domain.value import UserId


class UploadAvatarRequest(BaseModel):
    """Upload avatar request."""

    user_id: UserId
    upload: InstanceOf[MediaUpload] | None = None


class UploadAvatarResponse(ResponseModel):
    """Upload avatar response."""

    message: str
    avatar: str
    avatars: list[str]


class UploadAvatarUseCase:
    """Use case for adding an avatar to the caller's gallery."""

    def __init__(self, media_service: MediaService, user_service: UserService) -> None:
        """Initialize upload avatar use case.

        Args:
            media_service: Media ingestion service
            user_service: User domain service
        """
        self.media_service = media_service
        self.user_service = user_service

    async def execute(self, request: UploadAvatarRequest) -> UploadAvatarResponse:
        """Store the file, then append it to the user's avatars.

        The new avatar becomes the active one. If the user record cannot be
        updated the stored file is removed again.

        Raises:
            NoFileUploadedError: If there is no file
            UnsupportedMediaTypeError: If the file is not an allowed image
            MediaTooLargeError: If the file is over the size limit
            UserNotFoundError: If the user no longer exists
        """
        path = await self.media_service.store_avatar(request.user_id, request.upload)

        try:
            user = await self.user_service.add_avatar(request.user_id, path)
        except Exception:
            logfire.warn(
                "Avatar record update failed, discarding file",
                user_id=str(request.user_id),
                path=path,
            )
            await self.media_service.discard(path)
            raise

        return UploadAvatarResponse(
            message="Avatar uploaded successfully",
            avatar=user.avatar,
            avatars=list(user.avatars),
        )
