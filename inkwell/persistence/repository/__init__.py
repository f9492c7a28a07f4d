"""PostgreSQL repository implementations."""

from inkwell.persistence.repository.post import PostgresPostRepository
from inkwell.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
]
