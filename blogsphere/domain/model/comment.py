"""Comment entity.

Comments form a tree per blog: a top-level comment hangs directly off the
blog, a reply points at its immediate parent through ``parent_id``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from blogsphere.domain.model.common import DomainModel
from blogsphere.domain.value import BlogId, CommentId, UserId


class Comment(DomainModel):
    """Comment entity.

    Counters:
    - total_replies: number of ALL descendants (direct and indirect),
      kept in sync by CounterPropagator on every reply and deletion.

    total_replies carries no lower bound: it mirrors storage, and a
    deletion racing another deletion may leave it transiently negative.
    """

    id: CommentId
    blog_id: BlogId
    blog_author_id: UserId  # Denormalized for permission checks
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    is_reply: bool = False
    parent_id: Optional[CommentId] = None
    total_replies: int = 0
    is_edited: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_reply_has_parent(self) -> "Comment":
        """A comment is a reply exactly when it has a parent."""
        if self.is_reply != (self.parent_id is not None):
            raise ValueError("is_reply must be set if and only if parent_id is set")
        return self

    @property
    def subtree_size(self) -> int:
        """Number of comments removed from the tree when this one is deleted."""
        return 1 + self.total_replies
