"""SQLAlchemy table definitions for Blogsphere.

They match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(50), nullable=False, unique=True),
    Column("fullname", String(50), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("bio", String(200), nullable=True),
    Column("profile_image", Text, nullable=True),
    Column("social_links", JSONB, nullable=False, server_default="{}"),
    Column("total_posts", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# BLOGS TABLE
# ============================================================================
blogs_table = Table(
    "blogs",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("slug", String(120), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column("description", String(200), nullable=True),
    Column("content", JSONB, nullable=True),  # {"blocks": [...]}
    Column("cover_img_url", Text, nullable=True),
    Column("tags", ARRAY(String(30)), nullable=False, server_default="{}"),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_draft", Boolean, nullable=False, server_default="false"),
    # Activity counters, only ever changed through atomic increments
    Column("total_likes", Integer, nullable=False, server_default="0"),
    Column("total_reads", Integer, nullable=False, server_default="0"),
    Column("total_comments", Integer, nullable=False, server_default="0"),
    Column("total_parent_comments", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_blogs_author_id", blogs_table.c.author_id)
Index("idx_blogs_is_draft_created_at", blogs_table.c.is_draft, blogs_table.c.created_at.desc())
# GIN index on tags lives in the migration only

# ============================================================================
# BLOG LIKES TABLE
# ============================================================================
blog_likes_table = Table(
    "blog_likes",
    metadata,
    Column(
        "blog_id",
        UUID(as_uuid=True),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("blog_id", "user_id", name="pk_blog_likes"),
)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id deliberately has no foreign key: deleting a comment leaves its
# replies in place pointing at the removed id.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "blog_id",
        UUID(as_uuid=True),
        ForeignKey("blogs.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("blog_author_id", UUID(as_uuid=True), nullable=False),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column("is_reply", Boolean, nullable=False, server_default="false"),
    Column("parent_id", UUID(as_uuid=True), nullable=True),
    Column("total_replies", Integer, nullable=False, server_default="0"),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "is_reply = (parent_id IS NOT NULL)", name="reply_has_parent"
    ),
)

Index("idx_comments_blog_id", comments_table.c.blog_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)
