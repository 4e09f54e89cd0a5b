"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from blogsphere.domain.model import Blog, BlogActivity, BlogContent, Comment, User
from blogsphere.domain.model.blog import ContentBlock
from blogsphere.domain.value import BlogId, CommentId, Slug, TagName, UserId, Username


def make_user(username: str = "alice", **overrides) -> User:
    """Build a user for tests."""
    fields = {
        "id": UserId(uuid4()),
        "username": Username(username),
        "fullname": "Alice Author",
        "email": f"{username}@example.com",
    }
    fields.update(overrides)
    return User(**fields)


def make_blog(
    author_id: UserId | None = None,
    title: str = "Zustand in ten minutes",
    is_draft: bool = False,
    **overrides,
) -> Blog:
    """Build a valid blog (published unless ``is_draft``) for tests."""
    fields = {
        "id": BlogId(uuid4()),
        "slug": Slug.from_title(title),
        "title": title,
        "description": "A short tour",
        "content": BlogContent(
            blocks=[ContentBlock(type="paragraph", data={"text": "Hello"})]
        ),
        "tags": [TagName("react")],
        "author_id": author_id or UserId(uuid4()),
        "is_draft": is_draft,
        "activity": BlogActivity(),
    }
    fields.update(overrides)
    return Blog(**fields)


def make_comment(
    blog: Blog,
    parent: Comment | None = None,
    author_id: UserId | None = None,
    age_seconds: int = 0,
    **overrides,
) -> Comment:
    """Build a top-level comment, or a reply when ``parent`` is given.

    ``age_seconds`` shifts created_at into the past to control ordering.
    """
    created_at = datetime.now() - timedelta(seconds=age_seconds)
    fields = {
        "id": CommentId(uuid4()),
        "blog_id": blog.id,
        "blog_author_id": blog.author_id,
        "author_id": author_id or UserId(uuid4()),
        "content": "Nice post",
        "is_reply": parent is not None,
        "parent_id": parent.id if parent else None,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)
