"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from blogsphere.domain.model.comment import Comment
from blogsphere.domain.value import BlogId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Besides plain CRUD it exposes the atomic counter primitive the reply
    counters rely on. Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        blog_id: Optional[BlogId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments, newest first.

        Args:
            blog_id: Restrict to one blog (None for all blogs)
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of top-level comments
        """
        pass

    @abstractmethod
    async def count_top_level(self, blog_id: Optional[BlogId] = None) -> int:
        """Count top-level comments.

        Args:
            blog_id: Restrict to one blog (None for all blogs)

        Returns:
            Number of top-level comments
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find direct replies of a comment, newest first.

        Args:
            parent_id: The parent comment ID
            limit: Maximum number of replies to return
            offset: Number of replies to skip

        Returns:
            List of direct replies
        """
        pass

    @abstractmethod
    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies of a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Number of direct replies
        """
        pass

    @abstractmethod
    async def find_descendant_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Find IDs of every comment below a comment (children, grandchildren...).

        Args:
            comment_id: Root of the subtree (excluded from the result)

        Returns:
            Descendant IDs
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Overwrite the content of a comment and mark it as edited.

        Args:
            comment_id: ID of the comment to update
            content: New content

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_total_replies(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Atomically add a signed delta to a comment's total_replies.

        The delta is applied by the store without reading the value first,
        so concurrent increments on the same comment are never lost.

        Args:
            comment_id: ID of the comment to update
            delta: Signed amount to add

        Returns:
            The comment after the update (its parent_id drives the next
            step of an ancestor walk), or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment (hard delete).

        Descendants are left untouched.

        Args:
            comment_id: The comment ID to delete

        Returns:
            The deleted comment, or None if nothing was deleted
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete several comments.

        Args:
            comment_ids: IDs to delete

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog.

        Args:
            blog_id: The blog ID

        Returns:
            Number of comments deleted
        """
        pass
