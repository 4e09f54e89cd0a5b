"""Response items shared by blog use cases."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from blogsphere.domain.model.blog import Blog


class BlogActivityItem(BaseModel):
    """Activity counters of a blog."""

    total_likes: int
    total_reads: int
    total_comments: int
    total_parent_comments: int


class BlogItem(BaseModel):
    """Blog as returned by the API."""

    blog_id: str
    slug: str
    title: str
    description: str | None
    content: dict[str, Any] | None
    cover_img_url: str | None
    tags: list[str]
    author_id: str
    is_draft: bool
    activity: BlogActivityItem
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_blog(cls, blog: Blog) -> "BlogItem":
        return cls(
            blog_id=str(blog.id),
            slug=str(blog.slug),
            title=blog.title,
            description=blog.description,
            content=blog.content.model_dump() if blog.content else None,
            cover_img_url=blog.cover_img_url,
            tags=[str(tag) for tag in blog.tags],
            author_id=str(blog.author_id),
            is_draft=blog.is_draft,
            activity=BlogActivityItem(**blog.activity.model_dump()),
            created_at=blog.created_at,
            updated_at=blog.updated_at,
        )
