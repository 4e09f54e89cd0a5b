"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from blogsphere.domain.model import (
    Blog,
    BlogActivity,
    BlogContent,
    Comment,
    SocialLinks,
    User,
)
from blogsphere.domain.value import (
    BlogId,
    CommentId,
    Slug,
    TagName,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        fullname=row["fullname"],
        email=row["email"],
        bio=row.get("bio"),
        profile_image=row.get("profile_image"),
        social_links=SocialLinks(**(row.get("social_links") or {})),
        total_posts=row["total_posts"],
        total_reads=row["total_reads"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model.

    The activity counters are flat columns in the table.
    """
    content = row.get("content")
    return Blog(
        id=BlogId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        description=row.get("description"),
        content=BlogContent.model_validate(content) if content is not None else None,
        cover_img_url=row.get("cover_img_url"),
        tags=[TagName(tag) for tag in row.get("tags") or []],
        author_id=UserId(_uuid(row["author_id"])),
        is_draft=row["is_draft"],
        activity=BlogActivity(
            total_likes=row["total_likes"],
            total_reads=row["total_reads"],
            total_comments=row["total_comments"],
            total_parent_comments=row["total_parent_comments"],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict (activity flattened)."""
    data = blog.model_dump(exclude={"activity"})
    data.update(blog.activity.model_dump())
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        blog_author_id=UserId(_uuid(row["blog_author_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        is_reply=row["is_reply"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        total_replies=row["total_replies"],
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()
