"""Post aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import PostId, UserId

DEFAULT_READING_TIME = "Quick"


class Post(DomainModel):
    """Blog post aggregate root.

    The author is a plain reference: it is not checked for existence and may
    dangle once the author deletes their account.
    """

    id: PostId
    title: str = Field(min_length=1)
    author_id: UserId
    reading_time: str = DEFAULT_READING_TIME
    image: Optional[str] = None
    description: Optional[str] = None
    content: str = Field(min_length=1)
    tags: list[str] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    likes: list[UserId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @field_validator("title", "description", mode="before")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        """Trim surrounding whitespace."""
        return v.strip() if isinstance(v, str) else v

    @field_validator("likes")
    @classmethod
    def dedupe_likes(cls, v: list[UserId]) -> list[UserId]:
        """Likes behave as a set; keep first occurrence order."""
        return list(dict.fromkeys(v))
