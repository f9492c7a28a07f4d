"""Translation of domain errors into HTTP responses."""

from fastapi import HTTPException, status

from inkwell.domain.error import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the HTTP error the client sees.

    The domain message becomes ``detail``. Not-found errors use the
    ``"<Resource> not found"`` form without the identifier. Authentication
    failures carry a ``WWW-Authenticate: Bearer`` challenge.
    """
    if isinstance(error, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(error),
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, ConflictError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    # ValidationError, InvalidCredentialsError
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
