"""Update preferences use case."""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from inkwell.domain.error import ValidationError
from inkwell.domain.service import UserService
from inkwell.domain.value import Preferences, UserId

from .get_profile import UserProfile


class UpdatePreferencesRequest(BaseModel):
    """Update preferences request; ``preferences`` is the raw request body."""

    user_id: UserId
    preferences: dict[str, Any]


class UpdatePreferencesUseCase:
    """Use case for replacing the preferences record.

    The body replaces the whole record: any option it leaves out goes back to
    its default, so ``{}`` resets everything.
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: UpdatePreferencesRequest) -> UserProfile:
        """Validate and store the new preferences.

        Raises:
            ValidationError: If a recognised option has the wrong type
            UserNotFoundError: If the user no longer exists
        """
        try:
            preferences = Preferences.model_validate(request.preferences)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ValidationError(f"{field}: {error['msg']}") from e

        updated = await self.user_service.replace_preferences(
            request.user_id, preferences
        )
        return UserProfile.from_user(updated)
