"""PostgreSQL implementation of Blog repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, desc, func, select, update
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from blogsphere.domain.model import Blog
from blogsphere.domain.repository import BlogRepository
from blogsphere.domain.value import BlogId, Slug, TagName, UserId
from blogsphere.persistence.mappers import blog_to_dict, row_to_blog
from blogsphere.persistence.tables import blog_likes_table, blogs_table

_ACTIVITY_COLUMNS = (
    "total_likes",
    "total_reads",
    "total_comments",
    "total_parent_comments",
)


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def find_by_slug(self, slug: Slug) -> Optional[Blog]:
        """Find a blog by slug."""
        stmt = select(blogs_table).where(blogs_table.c.slug == slug.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    def _filters(
        self,
        tag: Optional[TagName],
        author_id: Optional[UserId],
        is_draft: bool,
    ) -> list:
        filters = [blogs_table.c.is_draft.is_(is_draft)]
        if tag is not None:
            filters.append(blogs_table.c.tags.any(tag.root))
        if author_id is not None:
            filters.append(blogs_table.c.author_id == author_id)
        return filters

    async def find_all(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        is_draft: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Blog]:
        """Find blogs with filtering and pagination, newest first."""
        stmt = (
            select(blogs_table)
            .where(and_(*self._filters(tag, author_id, is_draft)))
            .order_by(desc(blogs_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_blog(row._asdict()) for row in result.fetchall()]

    async def count(
        self,
        tag: Optional[TagName] = None,
        author_id: Optional[UserId] = None,
        is_draft: bool = False,
    ) -> int:
        """Count blogs matching the given filters."""
        stmt = (
            select(func.count())
            .select_from(blogs_table)
            .where(and_(*self._filters(tag, author_id, is_draft)))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update)."""
        existing = await self.find_by_id(blog.id)
        blog_dict = blog_to_dict(blog)

        if existing:
            for column in _ACTIVITY_COLUMNS:
                blog_dict.pop(column)
            stmt = (
                blogs_table.update()
                .where(blogs_table.c.id == blog.id)
                .values(**blog_dict)
            )
        else:
            stmt = blogs_table.insert().values(**blog_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(blog.id) or blog

    async def delete(self, blog_id: BlogId) -> bool:
        """Delete a blog (likes go with it through ON DELETE CASCADE)."""
        stmt = blogs_table.delete().where(blogs_table.c.id == blog_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return bool(result.rowcount)

    async def increment_activity(
        self,
        blog_id: BlogId,
        total_likes: int = 0,
        total_reads: int = 0,
        total_comments: int = 0,
        total_parent_comments: int = 0,
    ) -> Optional[Blog]:
        """Atomically add signed deltas to the activity counters."""
        stmt = (
            update(blogs_table)
            .where(blogs_table.c.id == blog_id)
            .values(
                total_likes=blogs_table.c.total_likes + total_likes,
                total_reads=blogs_table.c.total_reads + total_reads,
                total_comments=blogs_table.c.total_comments + total_comments,
                total_parent_comments=blogs_table.c.total_parent_comments
                + total_parent_comments,
            )
            .returning(blogs_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_blog(row._asdict())

    async def has_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether a user likes a blog."""
        stmt = select(blog_likes_table.c.blog_id).where(
            blog_likes_table.c.blog_id == blog_id,
            blog_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def add_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Record a like; a duplicate is ignored."""
        stmt = (
            insert(blog_likes_table)
            .values(blog_id=blog_id, user_id=user_id, created_at=datetime.now())
            .on_conflict_do_nothing(constraint="pk_blog_likes")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return bool(result.rowcount)

    async def remove_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Remove a like."""
        stmt = blog_likes_table.delete().where(
            blog_likes_table.c.blog_id == blog_id,
            blog_likes_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return bool(result.rowcount)
