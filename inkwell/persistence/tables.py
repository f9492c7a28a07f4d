"""SQLAlchemy table definitions for Inkwell.

They match the schema created by the Alembic migrations.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("public_id", UUID(as_uuid=True), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),  # Stored lower-cased
    Column("username", String(100), nullable=False),
    Column("password_hash", Text, nullable=False),
    Column("avatar", Text, nullable=False, server_default=""),
    Column("avatars", ARRAY(Text), nullable=False, server_default="{}"),
    Column("preferences", JSONB, nullable=False, server_default="{}"),
    Column("stats_posts", Integer, nullable=False, server_default="0"),
    Column("stats_likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    # Plain reference; deleting a user leaves their posts in place
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("reading_time", String(100), nullable=False, server_default="Quick"),
    Column("image", Text, nullable=True),
    Column("description", Text, nullable=True),
    Column("content", Text, nullable=False),
    Column("tags", ARRAY(Text), nullable=False, server_default="{}"),
    Column("links", ARRAY(Text), nullable=False, server_default="{}"),
    Column("likes", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
