"""Domain value objects for Blogsphere."""

from blogsphere.domain.value.identifiers import BlogId, CommentId, UserId
from blogsphere.domain.value.types import Slug, TagName, Username

__all__ = [
    # Identifiers
    "UserId",
    "BlogId",
    "CommentId",
    # Types
    "Slug",
    "TagName",
    "Username",
]
