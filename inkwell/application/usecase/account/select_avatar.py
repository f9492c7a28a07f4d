"""Select avatar use case."""

import logfire
from pydantic import BaseModel

from inkwell.application.usecase.base import ResponseModel
from inkwell.domain.error import AvatarNotUploadedError, ValidationError
from inkwell.domain.service import UserService
from inkwell.domain.value import UserId


class SelectAvatarRequest(BaseModel):
    """Select avatar request."""

    user_id: UserId
    avatar: str | None = None


class SelectAvatarResponse(ResponseModel):
    """Select avatar response."""

    message: str
    avatar: str


class SelectAvatarUseCase:
    """Use case for switching the active avatar to a previous upload."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: SelectAvatarRequest) -> SelectAvatarResponse:
        """Activate one of the caller's uploaded avatars.

        Raises:
            ValidationError: If no avatar is given
            AvatarNotUploadedError: If the caller never uploaded it
            UserNotFoundError: If the user no longer exists
        """
        if not request.avatar:
            raise ValidationError("Avatar not provided")

        user = await self.user_service.get_by_id(request.user_id)
        if not user.has_uploaded(request.avatar):
            logfire.warn("Avatar selection outside uploads", user_id=str(user.id))
            raise AvatarNotUploadedError(request.avatar)

        updated = await self.user_service.set_active_avatar(user.id, request.avatar)
        return SelectAvatarResponse(
            message="Avatar updated successfully", avatar=updated.avatar
        )
