"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import PostId, UserId
from inkwell.domain.value.types import (
    Email,
    Preferences,
    UserStats,
    Username,
    is_strong_password,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "Email",
    "Username",
    "Preferences",
    "UserStats",
    "is_strong_password",
]
