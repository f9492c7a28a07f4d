"""Domain value objects for Inkwell.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re

from pydantic import ConfigDict, Field, field_validator

from inkwell.domain.value.common import RootValueObject, ValueObject

# Lowercase, uppercase, digit and one of @$!%*?&; nothing outside that alphabet
PASSWORD_POLICY = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{12,}$"
)
PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 12 characters and include uppercase, "
    "lowercase, number, and symbol"
)


def is_strong_password(password: str) -> bool:
    """Check a plaintext password against the signup strength policy."""
    return PASSWORD_POLICY.fullmatch(password) is not None


class Email(RootValueObject[str]):
    """Account email address.

    Stored trimmed and lower-cased so lookups are case-insensitive.
    """

    @field_validator("root")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        """Trim, lower-case and check the basic address shape."""
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Email address is not valid")
        if len(v) > 255:
            raise ValueError("Email must be at most 255 characters")
        return v


class Username(RootValueObject[str]):
    """Display name; trimmed, not unique."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Trim and require a non-empty name."""
        v = v.strip()
        if len(v) < 1 or len(v) > 100:
            raise ValueError("Username must be 1-100 characters")
        return v


class Preferences(ValueObject):
    """User interface preferences.

    Always replaced as a whole; fields missing from an update fall back to
    their defaults.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    dark_mode: bool = Field(default=False, alias="darkMode", strict=True)


class UserStats(ValueObject):
    """Per-user counters."""

    posts: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
