"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from blogsphere.domain.model.comment import Comment
from blogsphere.domain.repository.comment import CommentRepository
from blogsphere.domain.value import BlogId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    def _top_level(self, blog_id: Optional[BlogId]) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if not c.is_reply and (blog_id is None or c.blog_id == blog_id)
        ]

    async def find_top_level(
        self,
        blog_id: Optional[BlogId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments, newest first."""
        comments = self._top_level(blog_id)
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level(self, blog_id: Optional[BlogId] = None) -> int:
        """Count top-level comments."""
        return len(self._top_level(blog_id))

    async def find_children(
        self,
        parent_id: CommentId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find direct replies of a comment, newest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return comments[offset : offset + limit]

    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies of a comment."""
        return sum(1 for c in self._comments.values() if c.parent_id == parent_id)

    async def find_descendant_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Find IDs of every comment below a comment, breadth first."""
        found: list[CommentId] = []
        frontier = [comment_id]
        while frontier:
            children = [
                c.id
                for c in self._comments.values()
                if c.parent_id in frontier and c.id not in found and c.id != comment_id
            ]
            found.extend(children)
            frontier = children
        return found

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        existing = self._comments.get(comment.id)
        if existing:
            comment = comment.model_copy(
                update={"total_replies": existing.total_replies}
            )
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Overwrite the content of a comment and mark it as edited."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"content": content, "is_edited": True})
        self._comments[comment_id] = updated
        return updated

    async def increment_total_replies(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Add a signed delta to total_replies."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(
            update={"total_replies": comment.total_replies + delta}
        )
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment and return it as it was when removed."""
        return self._comments.pop(comment_id, None)

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete several comments."""
        removed = 0
        for comment_id in comment_ids:
            if self._comments.pop(comment_id, None) is not None:
                removed += 1
        return removed

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog."""
        ids = [c.id for c in self._comments.values() if c.blog_id == blog_id]
        return await self.delete_many(ids)
