"""Delete account use case."""

from pydantic import BaseModel

from inkwell.application.usecase.base import MessageResponse
from inkwell.domain.error import UserNotFoundError
from inkwell.domain.service import UserService
from inkwell.domain.value import UserId


class DeleteAccountRequest(BaseModel):
    """Delete account request."""

    user_id: UserId


class DeleteAccountUseCase:
    """Use case for deleting the caller's account.

    Only the user record goes. Authored posts keep pointing at the deleted
    id, uploaded files stay on disk and issued tokens stay valid until they
    expire (the auth gate rejects them because the user no longer resolves).
    """

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteAccountRequest) -> MessageResponse:
        """Delete the user record.

        Raises:
            UserNotFoundError: If the record was already gone
        """
        if not await self.user_service.delete(request.user_id):
            raise UserNotFoundError(str(request.user_id))
        return MessageResponse(message="Account deleted successfully")
