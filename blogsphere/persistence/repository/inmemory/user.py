"""In-memory user repository for testing."""

from typing import Optional

from blogsphere.domain.model.user import User
from blogsphere.domain.repository.user import UserRepository
from blogsphere.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        email = email.lower()
        for user in self._users.values():
            if user.email.lower() == email:
                return user
        return None

    async def username_exists(self, username: Username) -> bool:
        """Check whether a username is taken."""
        return any(user.username == username for user in self._users.values())

    async def find_all(self, limit: int = 10) -> list[User]:
        """List users, newest first."""
        users = sorted(self._users.values(), key=lambda u: u.created_at, reverse=True)
        return users[:limit]

    async def save(self, user: User) -> User:
        """Save or update a user, keeping stored counters."""
        existing = self._users.get(user.id)
        if existing:
            user = user.model_copy(
                update={
                    "total_posts": existing.total_posts,
                    "total_reads": existing.total_reads,
                }
            )
        self._users[user.id] = user
        return user

    async def increment_counters(
        self,
        user_id: UserId,
        total_posts: int = 0,
        total_reads: int = 0,
    ) -> Optional[User]:
        """Add signed deltas to the account counters."""
        user = self._users.get(user_id)
        if user is None:
            return None
        updated = user.model_copy(
            update={
                "total_posts": user.total_posts + total_posts,
                "total_reads": user.total_reads + total_reads,
            }
        )
        self._users[user_id] = updated
        return updated
