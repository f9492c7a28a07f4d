"""Update profile use case."""

import logfire
from pydantic import BaseModel

from inkwell.domain.error import EmailAlreadyRegisteredError, ValidationError
from inkwell.domain.service import UserService
from inkwell.domain.value import Email, UserId, Username
from inkwell.domain.value.common import parse_value

from .get_profile import UserProfile


class UpdateProfileRequest(BaseModel):
    """Partial profile patch; empty strings count as absent."""

    user_id: UserId
    username: str | None = None
    email: str | None = None


class UpdateProfileUseCase:
    """Use case for changing username and/or email."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UserProfile:
        """Apply the patch.

        Raises:
            ValidationError: If neither field is given, or one is malformed
            EmailAlreadyRegisteredError: If the email belongs to someone else
            UserNotFoundError: If the user no longer exists
        """
        if not request.username and not request.email:
            raise ValidationError("Nothing to update")

        username = parse_value(Username, request.username) if request.username else None
        email = parse_value(Email, request.email) if request.email else None

        if email is not None:
            holder = await self.user_service.get_user_by_email(email)
            if holder is not None and holder.id != request.user_id:
                logfire.warn("Email change to a registered address", user_id=str(request.user_id))
                raise EmailAlreadyRegisteredError(email.root)

        updated = await self.user_service.update_profile(
            request.user_id, username=username, email=email
        )
        return UserProfile.from_user(updated)
