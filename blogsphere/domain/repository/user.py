"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from blogsphere.domain.model.user import User
from blogsphere.domain.value import UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        pass

    @abstractmethod
    async def username_exists(self, username: Username) -> bool:
        """Check whether a username is taken."""
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10) -> list[User]:
        """List users, newest first."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass

    @abstractmethod
    async def increment_counters(
        self,
        user_id: UserId,
        total_posts: int = 0,
        total_reads: int = 0,
    ) -> Optional[User]:
        """Atomically add signed deltas to a user's account counters.

        Args:
            user_id: The user ID
            total_posts: Delta for total_posts
            total_reads: Delta for total_reads

        Returns:
            The user after the update, or None if it doesn't exist
        """
        pass
