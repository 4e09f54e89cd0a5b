"""User domain service."""

import re
from datetime import datetime
from uuid import uuid4

import logfire

from blogsphere.domain.error import AlreadyExistsError, NotFoundError
from blogsphere.domain.model.user import SocialLinks, User
from blogsphere.domain.repository import UserRepository
from blogsphere.domain.value import UserId, Username

from .base import Service

_USERNAME_INVALID_CHARS = re.compile(r"[^a-z0-9._-]+")


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register_user(self, fullname: str, email: str) -> User:
        """Create a user profile.

        Args:
            fullname: Full name
            email: Email address (unique, stored lowercased)

        Returns:
            Created user

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        email = email.strip().lower()
        with logfire.span("user_service.register_user", email=email):
            if await self.user_repository.find_by_email(email):
                logfire.warn("Email already registered", email=email)
                raise AlreadyExistsError("User", "email", email)

            username = await self._generate_username(email)
            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=username,
                fullname=fullname.strip(),
                email=email,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=str(saved.username)
            )
            return saved

    async def _generate_username(self, email: str) -> Username:
        """Derive a free username from the local part of an email.

        ``alice@example.com`` becomes ``alice``, then ``alice1``,
        ``alice2``... while those are taken.
        """
        base = _USERNAME_INVALID_CHARS.sub("", email.split("@", 1)[0])[:45]
        base = base.ljust(3, "0")

        candidate = Username(base)
        suffix = 0
        while await self.user_repository.username_exists(candidate):
            suffix += 1
            candidate = Username(f"{base}{suffix}")
        return candidate

    async def get_user_by_id(self, user_id: UserId) -> User | None:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.get_user_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found", user_id=str(user_id))
            return user

    async def update_profile(
        self,
        user_id: UserId,
        fullname: str | None = None,
        bio: str | None = None,
        profile_image: str | None = None,
        social_links: dict[str, str] | None = None,
    ) -> User:
        """Apply a partial profile update.

        Fields left as None keep their value. An empty bio or profile image
        clears it. Social links are merged by name, so links not mentioned
        are kept.

        Args:
            user_id: User ID
            fullname: New full name
            bio: New bio
            profile_image: New profile image URL
            social_links: Links to replace, by name

        Returns:
            Updated user

        Raises:
            NotFoundError: If the user doesn't exist
            ValueError: If a field is invalid
        """
        with logfire.span("user_service.update_profile", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("User not found for profile update", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))

            update: dict = {"updated_at": datetime.now()}
            if fullname is not None:
                update["fullname"] = fullname.strip()
            if bio is not None:
                update["bio"] = bio.strip() or None
            if profile_image is not None:
                update["profile_image"] = profile_image.strip() or None
            if social_links:
                update["social_links"] = SocialLinks(
                    **{**user.social_links.model_dump(), **social_links}
                )

            updated = User.model_validate({**user.model_dump(), **update})
            saved = await self.user_repository.save(updated)
            logfire.info(
                "User profile updated",
                user_id=str(saved.id),
                fields=sorted(k for k in update if k != "updated_at"),
            )
            return saved

    async def list_users(self, limit: int = 10) -> list[User]:
        """List users, newest first."""
        with logfire.span("user_service.list_users", limit=limit):
            return await self.user_repository.find_all(limit=limit)

    async def adjust_total_posts(self, user_id: UserId, delta: int) -> User:
        """Atomically add ``delta`` to a user's published post count.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span(
            "user_service.adjust_total_posts", user_id=str(user_id), delta=delta
        ):
            user = await self.user_repository.increment_counters(
                user_id, total_posts=delta
            )
            if user is None:
                logfire.error("User not found for post count update", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def record_read(self, user_id: UserId) -> User:
        """Atomically add one read to an author's account.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("user_service.record_read", user_id=str(user_id)):
            user = await self.user_repository.increment_counters(
                user_id, total_reads=1
            )
            if user is None:
                logfire.error("User not found for read count update", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user
