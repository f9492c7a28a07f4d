"""User aggregate root.

Users sign up with an email and password, keep a gallery of uploaded
avatars and carry a couple of counters shown on their profile.
"""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import Email, Preferences, UserId, UserStats, Username


class User(DomainModel):
    """User aggregate root.

    ``avatar`` is either empty or one of ``avatars``; that rule is checked
    when an avatar is selected, not on every write.
    """

    id: UserId
    public_id: UUID = Field(default_factory=uuid4)
    email: Email
    username: Username
    password_hash: str = Field(repr=False)
    avatar: str = ""
    avatars: list[str] = Field(default_factory=list)
    preferences: Preferences = Field(default_factory=Preferences)
    stats: UserStats = Field(default_factory=UserStats)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    def has_uploaded(self, avatar: str) -> bool:
        """Whether ``avatar`` is one of this user's uploaded avatar paths."""
        return avatar in self.avatars
