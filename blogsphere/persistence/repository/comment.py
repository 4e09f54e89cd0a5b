"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy import desc, func, literal, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogsphere.domain.model import Comment
from blogsphere.domain.repository import CommentRepository
from blogsphere.domain.value import BlogId, CommentId
from blogsphere.persistence.mappers import comment_to_dict, row_to_comment
from blogsphere.persistence.tables import comments_table

# Guards the recursive subtree query against parent_id cycles.
_MAX_TREE_DEPTH = 10_000


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level(
        self,
        blog_id: Optional[BlogId] = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments, newest first."""
        stmt = select(comments_table).where(comments_table.c.is_reply.is_(False))
        if blog_id is not None:
            stmt = stmt.where(comments_table.c.blog_id == blog_id)

        stmt = (
            stmt.order_by(desc(comments_table.c.created_at)).limit(limit).offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, blog_id: Optional[BlogId] = None) -> int:
        """Count top-level comments."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.is_reply.is_(False))
        )
        if blog_id is not None:
            stmt = stmt.where(comments_table.c.blog_id == blog_id)

        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_children(
        self,
        parent_id: CommentId,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Comment]:
        """Find direct replies of a comment, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_children(self, parent_id: CommentId) -> int:
        """Count direct replies of a comment."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.parent_id == parent_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_descendant_ids(self, comment_id: CommentId) -> list[CommentId]:
        """Find IDs of every comment below a comment.

        Uses a recursive CTE walking parent_id downwards.
        """
        subtree = (
            select(comments_table.c.id, literal(1).label("depth"))
            .where(comments_table.c.parent_id == comment_id)
            .cte(name="subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(comments_table.c.id, (subtree.c.depth + 1).label("depth"))
            .where(comments_table.c.parent_id == subtree.c.id)
            .where(subtree.c.depth < _MAX_TREE_DEPTH)
        )
        stmt = select(subtree.c.id).order_by(subtree.c.depth)
        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        if existing:
            # total_replies is owned by increment_total_replies
            comment_dict.pop("total_replies")
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(comment.id) or comment

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Overwrite the content of a comment and mark it as edited."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, is_edited=True, updated_at=datetime.now())
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def increment_total_replies(
        self, comment_id: CommentId, delta: int
    ) -> Optional[Comment]:
        """Atomically add a signed delta to total_replies.

        SQL-level increment: the current value is never read into Python.
        """
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(total_replies=comments_table.c.total_replies + delta)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> Optional[Comment]:
        """Delete a comment and return the row as it was when removed."""
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id == comment_id)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete several comments."""
        if not comment_ids:
            return 0
        stmt = comments_table.delete().where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0

    async def delete_by_blog(self, blog_id: BlogId) -> int:
        """Delete every comment of a blog."""
        stmt = comments_table.delete().where(comments_table.c.blog_id == blog_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0
