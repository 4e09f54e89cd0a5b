"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blogsphere.domain.model.blog import Blog
from blogsphere.domain.value import BlogId, Slug, TagName, UserId


class BlogRepository(ABC):
    """Repository for Blog aggregate.

    Defines the contract for blog persistence operations, including the
    atomic activity counters. Implementations live in the infrastructure
    layer.
    """

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by its public slug.

        Args:
            slug: The blog slug

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        is_draft: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Blog]:
        """Find blogs with filtering and pagination, newest first.

        Args:
            tag: Filter by tag (None for all tags)
            author_id: Filter by author (None for all authors)
            is_draft: List drafts instead of published blogs
            limit: Maximum number of blogs to return
            offset: Number of blogs to skip

        Returns:
            List of blogs matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        is_draft: bool = False,
    ) -> int:
        """Count blogs matching the given filters.

        Args:
            tag: Filter by tag (None for all tags)
            author_id: Filter by author (None for all authors)
            is_draft: Count drafts instead of published blogs

        Returns:
            Total number of blogs matching the criteria
        """
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Activity counters are owned by increment_activity and are not
        overwritten when updating an existing blog.

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass

    @abstractmethod
    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog and its likes.

        Args:
            blog_id: The blog ID to delete

        Returns:
            True if a blog was deleted
        """
        pass

    @abstractmethod
    async def increment_activity(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_reads: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
    ) -> Optional[Blog]:
        """Atomically add signed deltas to a blog's activity counters.

        Args:
            blog_id: The blog ID
            total_likes: Delta for activity.total_likes
            total_reads: Delta for activity.total_reads
            total_comments: Delta for activity.total_comments
            total_parent_comments: Delta for activity.total_parent_comments

        Returns:
            The blog after the update, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def has_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether a user likes a blog.

        Args:
            blog_id: The blog ID
            user_id: The user ID

        Returns:
            True if the like exists
        """
        pass

    @abstractmethod
    async def add_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Record a like.

        Args:
            blog_id: The blog ID
            user_id: The user ID

        Returns:
            True if the like was added, False if it already existed
        """
        pass

    @abstractmethod
    async def remove_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Remove a like.

        Args:
            blog_id: The blog ID
            user_id: The user ID

        Returns:
            True if a like was removed
        """
        pass
