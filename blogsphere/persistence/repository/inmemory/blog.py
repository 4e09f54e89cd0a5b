"""In-memory blog repository for testing."""

from typing import Optional

from blogsphere.domain.model.blog import Blog
from blogsphere.domain.repository.blog import BlogRepository
from blogsphere.domain.value import BlogId, Slug, TagName, UserId


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}
        self._likes: set[tuple[BlogId, UserId]] = set()

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        return self._blogs.get(blog_id)

    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by slug."""
        for blog in self._blogs.values():
            if blog.slug == slug:
                return blog
        return None

    def _matching(
        self,
        tag: Optional[TagName],
        author_id: Optional[UserId],
        is_draft: bool,
    ) -> list[Blog]:
        blogs = [b for b in self._blogs.values() if b.is_draft == is_draft]
        if tag is not None:
            blogs = [b for b in blogs if tag in b.tags]
        if author_id is not None:
            blogs = [b for b in blogs if b.author_id == author_id]
        return blogs

    async def find_all(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        is_draft: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Blog]:
        """Find blogs with filtering and pagination, newest first."""
        blogs = self._matching(tag, author_id, is_draft)
        blogs.sort(key=lambda b: b.created_at, reverse=True)
        return blogs[offset : offset + limit]

    async def count(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        is_draft: bool = False,
    ) -> int:
        """Count blogs matching the given filters."""
        return len(self._matching(tag, author_id, is_draft))

    async def save(self, blog: Blog) -> Blog:
        """Save or update a blog, keeping stored activity counters."""
        existing = self._blogs.get(blog.id)
        if existing:
            blog = blog.model_copy(update={"activity": existing.activity})
        self._blogs[blog.id] = blog
        return blog

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog and its likes."""
        if self._blogs.pop(blog_id, None) is None:
            return False
        self._likes = {like for like in self._likes if like[0] != blog_id}
        return True

    async def increment_activity(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_reads: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
    ) -> Optional[Blog]:
        """Add signed deltas to the activity counters."""
        blog = self._blogs.get(blog_id)
        if blog is None:
            return None
        activity = blog.activity.model_copy(
            update={
                "total_likes": blog.activity.total_likes + total_likes,
                "total_reads": blog.activity.total_reads + total_reads,
                "total_comments": blog.activity.total_comments + total_comments,
                "total_parent_comments": blog.activity.total_parent_comments
                + total_parent_comments,
            }
        )
        updated = blog.model_copy(update={"activity": activity})
        self._blogs[blog_id] = updated
        return updated

    async def has_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether a user likes a blog."""
        return (blog_id, user_id) in self._likes

    async def add_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Record a like."""
        if (blog_id, user_id) in self._likes:
            return False
        self._likes.add((blog_id, user_id))
        return True

    async def remove_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Remove a like."""
        if (blog_id, user_id) not in self._likes:
            return False
        self._likes.discard((blog_id, user_id))
        return True
