"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blogsphere.domain.model import User
from blogsphere.domain.repository import UserRepository
from blogsphere.domain.value import UserId, Username
from blogsphere.persistence.mappers import row_to_user, user_to_dict
from blogsphere.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        stmt = select(users_table).where(
            func.lower(users_table.c.email) == email.lower()
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def username_exists(self, username: Username) -> bool:
        """Check whether a username is taken."""
        stmt = select(users_table.c.id).where(users_table.c.username == username.root)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_all(self, limit: int = 10) -> list[User]:
        """List users, newest first."""
        stmt = (
            select(users_table).order_by(users_table.c.created_at.desc()).limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        existing = await self.find_by_id(user.id)
        user_dict = user_to_dict(user)

        if existing:
            user_dict.pop("total_posts")
            user_dict.pop("total_reads")
            stmt = (
                users_table.update()
                .where(users_table.c.id == user.id)
                .values(**user_dict)
            )
        else:
            stmt = users_table.insert().values(**user_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return await self.find_by_id(user.id) or user

    async def increment_counters(
        self,
        user_id: UserId,
        total_posts: int = 0,
        total_reads: int = 0,
    ) -> Optional[User]:
        """Atomically add signed deltas to the account counters."""
        stmt = (
            update(users_table)
            .where(users_table.c.id == user_id)
            .values(
                total_posts=users_table.c.total_posts + total_posts,
                total_reads=users_table.c.total_reads + total_reads,
            )
            .returning(users_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_user(row._asdict())
