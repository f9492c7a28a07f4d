"""FastAPI dependencies shared by routes."""

from typing import Annotated

from dishka import AsyncContainer
from fastapi import Depends, Header, Request

from inkwell.application.usecase.auth import (
    AuthContext,
    AuthenticateRequest,
    AuthenticateUseCase,
)
from inkwell.domain.error import DomainError
from inkwell.interface.error import to_http_exception


async def require_auth(
    request: Request,
    authorization: Annotated[str | None, Header()] = None,
) -> AuthContext:
    """Resolve the bearer token to the calling user or reject with 401.

    Protected handlers take the returned context as a parameter; the request
    object itself is left untouched.
    """
    container: AsyncContainer = request.state.dishka_container
    use_case = await container.get(AuthenticateUseCase)
    try:
        return await use_case.execute(AuthenticateRequest(authorization=authorization))
    except DomainError as e:
        raise to_http_exception(e)


CurrentUser = Annotated[AuthContext, Depends(require_auth)]
