"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class WeakPasswordError(ValidationError):
    """Raised when a signup password does not satisfy the strength policy."""

    pass


class NoFileUploadedError(ValidationError):
    """Raised when an upload request carries no file."""

    def __init__(self) -> None:
        super().__init__("No file uploaded")


class UnsupportedMediaTypeError(ValidationError):
    """Raised when an upload's content type is not allowed."""

    def __init__(self, content_type: str | None) -> None:
        self.content_type = content_type
        super().__init__("Only images are allowed")


class MediaTooLargeError(ValidationError):
    """Raised when an upload exceeds its size limit."""

    def __init__(self, limit_bytes: int) -> None:
        self.limit_bytes = limit_bytes
        super().__init__(f"File too large (maximum {limit_bytes} bytes)")


class AvatarNotUploadedError(ValidationError):
    """Raised when selecting an avatar the user never uploaded."""

    def __init__(self, avatar: str) -> None:
        self.avatar = avatar
        super().__init__("Avatar not in your uploads")


class InvalidCredentialsError(DomainError):
    """Raised on login failure.

    Deliberately does not say whether the email or the password was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class AuthenticationError(DomainError):
    """Base error for failed request authentication."""

    pass


class AuthenticationRequiredError(AuthenticationError):
    """Raised when no bearer token was presented."""

    def __init__(self) -> None:
        super().__init__("Authentication required")


class InvalidTokenError(AuthenticationError):
    """Raised when a bearer token fails signature or expiry checks."""

    def __init__(self, reason: str = "Invalid or expired token") -> None:
        super().__init__(reason)


class UnknownAccountError(AuthenticationError):
    """Raised when a valid token names a user that no longer exists."""

    def __init__(self, subject: str) -> None:
        self.subject = subject
        super().__init__("User not found")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class UserNotFoundError(NotFoundError):
    """Raised when a user record does not exist."""

    def __init__(self, identifier: str):
        super().__init__("User", identifier)


class PostNotFoundError(NotFoundError):
    """Raised when a post record does not exist."""

    def __init__(self, identifier: str):
        super().__init__("Blog", identifier)


class ConflictError(DomainError):
    """Raised when a write would violate a uniqueness rule."""

    pass


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when an email is already used by another account."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")
