"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's imperative mapping.
"""

from typing import Any, Mapping
from uuid import UUID

from inkwell.domain.model import Post, User
from inkwell.domain.value import (
    Email,
    PostId,
    Preferences,
    UserId,
    UserStats,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Mapping[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        public_id=_uuid(row["public_id"]),
        email=Email(row["email"]),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        avatar=row["avatar"] or "",
        avatars=list(row["avatars"] or []),
        preferences=Preferences.model_validate(row["preferences"] or {}),
        stats=UserStats(posts=row["stats_posts"], likes=row["stats_likes"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> dict[str, Any]:
    """Convert User domain model to a dict of column values."""
    return {
        "id": user.id,
        "public_id": user.public_id,
        "email": user.email.root,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "avatar": user.avatar,
        "avatars": list(user.avatars),
        "preferences": preferences_to_json(user.preferences),
        "stats_posts": user.stats.posts,
        "stats_likes": user.stats.likes,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def preferences_to_json(preferences: Preferences) -> dict[str, Any]:
    """JSONB document for the preferences column (camelCase keys)."""
    return preferences.model_dump(by_alias=True)


def row_to_post(row: Mapping[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        author_id=UserId(_uuid(row["author_id"])),
        reading_time=row["reading_time"],
        image=row.get("image"),
        description=row.get("description"),
        content=row["content"],
        tags=list(row["tags"] or []),
        links=list(row["links"] or []),
        likes=[UserId(_uuid(v)) for v in row["likes"] or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> dict[str, Any]:
    """Convert Post domain model to a dict of column values."""
    return {
        "id": post.id,
        "title": post.title,
        "author_id": post.author_id,
        "reading_time": post.reading_time,
        "image": post.image,
        "description": post.description,
        "content": post.content,
        "tags": list(post.tags),
        "links": list(post.links),
        "likes": list(post.likes),
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }
