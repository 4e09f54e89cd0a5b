"""initial_schema

Create the Blogsphere schema:
- Users (profile and activity counters)
- Blogs (block content, tags, activity counters)
- Blog likes (one row per user and blog)
- Comments (threaded, denormalized reply counts)

Revision ID: 3c9d1f2a7b40
Revises:
Create Date: 2026-10-18 10:12:44.318207

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c9d1f2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS TABLE
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("fullname", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("bio", sa.String(length=200), nullable=True),
        sa.Column("profile_image", sa.Text(), nullable=True),
        sa.Column(
            "social_links",
            postgresql.JSONB(),
            server_default="{}",
            nullable=False,
        ),
        sa.Column("total_posts", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_reads", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    # ========================================================================
    # BLOGS TABLE
    # ========================================================================
    op.create_table(
        "blogs",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("slug", sa.String(length=120), nullable=False),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("content", postgresql.JSONB(), nullable=True),
        sa.Column("cover_img_url", sa.Text(), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(length=30)),
            server_default="{}",
            nullable=False,
        ),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("is_draft", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("total_likes", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_reads", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_comments", sa.Integer(), server_default="0", nullable=False),
        sa.Column(
            "total_parent_comments", sa.Integer(), server_default="0", nullable=False
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
    )

    op.create_index("idx_blogs_author_id", "blogs", ["author_id"])
    op.create_index(
        "idx_blogs_is_draft_created_at",
        "blogs",
        ["is_draft", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_blogs_tags", "blogs", ["tags"], postgresql_using="gin"
    )

    # ========================================================================
    # BLOG LIKES TABLE
    # ========================================================================
    op.create_table(
        "blog_likes",
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("blog_id", "user_id", name="pk_blog_likes"),
    )

    # ========================================================================
    # COMMENTS TABLE
    # ========================================================================
    # No foreign key on parent_id: replies outlive a deleted parent.
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("blog_id", sa.UUID(), nullable=False),
        sa.Column("blog_author_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("is_reply", sa.Boolean(), server_default="false", nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("total_replies", sa.Integer(), server_default="0", nullable=False),
        sa.Column("is_edited", sa.Boolean(), server_default="false", nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("NOW()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(["blog_id"], ["blogs.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "is_reply = (parent_id IS NOT NULL)", name="reply_has_parent"
        ),
    )

    op.create_index("idx_comments_blog_id", "comments", ["blog_id"])
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comments")
    op.drop_table("blog_likes")
    op.drop_table("blogs")
    op.drop_table("users")
