"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from blogsphere.domain.error import AlreadyExistsError, NotFoundError
from blogsphere.domain.service import UserService
from blogsphere.domain.value import UserId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestRegisterUser:
    """Tests for register_user."""

    @pytest.mark.asyncio
    async def test_username_comes_from_email(self, unit_env):
        """The email local part becomes the username."""
        user_service = await unit_env.get(UserService)

        user = await user_service.register_user("Alice Doe", "Alice@Example.com")

        assert str(user.username) == "alice"
        assert user.email == "alice@example.com"
        assert user.total_posts == 0

    @pytest.mark.asyncio
    async def test_username_collision_gets_numeric_suffix(self, unit_env):
        """Same local part on another domain gets the next free suffix."""
        user_service = await unit_env.get(UserService)

        await user_service.register_user("Alice Doe", "alice@example.com")
        second = await user_service.register_user("Alice Roe", "alice@example.org")
        third = await user_service.register_user("Alice Poe", "alice@example.net")

        assert str(second.username) == "alice1"
        assert str(third.username) == "alice2"

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, unit_env):
        """An email can only be registered once."""
        user_service = await unit_env.get(UserService)
        await user_service.register_user("Alice Doe", "alice@example.com")

        with pytest.raises(AlreadyExistsError):
            await user_service.register_user("Alice Again", "ALICE@example.com")


class TestCounters:
    """Tests for adjust_total_posts and record_read."""

    @pytest.mark.asyncio
    async def test_adjust_and_record(self, unit_env):
        """Counters move by the requested deltas."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("Bob Smith", "bob@example.com")

        await user_service.adjust_total_posts(user.id, 1)
        updated = await user_service.record_read(user.id)

        assert updated.total_posts == 1
        assert updated.total_reads == 1

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, unit_env):
        """Counters of a missing user cannot be changed."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.adjust_total_posts(UserId(uuid4()), 1)


class TestUpdateProfile:
    """Tests for update_profile."""

    @pytest.mark.asyncio
    async def test_only_given_fields_change(self, unit_env):
        """Fields left as None keep their stored value."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("Alice Doe", "alice@example.com")

        updated = await user_service.update_profile(user.id, bio="  Writes on trees ")

        assert updated.bio == "Writes on trees"
        assert updated.fullname == "Alice Doe"
        assert updated.username == user.username

    @pytest.mark.asyncio
    async def test_social_links_are_merged(self, unit_env):
        """Links not mentioned in an update are kept."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("Alice Doe", "alice@example.com")
        await user_service.update_profile(
            user.id, social_links={"github": "https://github.com/alice"}
        )

        updated = await user_service.update_profile(
            user.id, social_links={"website": "https://alice.dev"}
        )

        assert updated.social_links.github == "https://github.com/alice"
        assert updated.social_links.website == "https://alice.dev"
        assert updated.social_links.youtube == ""

    @pytest.mark.asyncio
    async def test_invalid_link_is_rejected(self, unit_env):
        """Links must be http(s) URLs."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("Alice Doe", "alice@example.com")

        with pytest.raises(ValueError):
            await user_service.update_profile(
                user.id, social_links={"twitter": "not a url"}
            )

    @pytest.mark.asyncio
    async def test_counters_survive_an_update(self, unit_env):
        """A profile update never rewinds the account counters."""
        user_service = await unit_env.get(UserService)
        user = await user_service.register_user("Alice Doe", "alice@example.com")
        await user_service.adjust_total_posts(user.id, 2)

        updated = await user_service.update_profile(user.id, fullname="Alice Poe")

        assert updated.fullname == "Alice Poe"
        assert updated.total_posts == 2

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """Updating a missing user is NotFound."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.update_profile(UserId(uuid4()), bio="Hi")


class TestListUsers:
    """Tests for list_users."""

    @pytest.mark.asyncio
    async def test_limit_caps_the_listing(self, unit_env):
        user_service = await unit_env.get(UserService)
        for name in ("ann", "ben", "cat"):
            await user_service.register_user(f"{name} Doe", f"{name}@example.com")

        users = await user_service.list_users(limit=2)

        assert len(users) == 2
        assert {str(u.username) for u in users} <= {"ann", "ben", "cat"}
