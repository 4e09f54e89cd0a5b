"""Domain model entities for Blogsphere."""

from blogsphere.domain.model.blog import (
    Blog,
    BlogActivity,
    BlogContent,
    BlogSummary,
    ContentBlock,
)
from blogsphere.domain.model.comment import Comment
from blogsphere.domain.model.user import SocialLinks, User

__all__ = [
    "Blog",
    "BlogActivity",
    "BlogContent",
    "BlogSummary",
    "Comment",
    "ContentBlock",
    "SocialLinks",
    "User",
]
