"""Unit tests for RegisterUserUseCase and GetUserProfileUseCase."""

from uuid import uuid4

import pytest

from blogsphere.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUserProfileUseCases:
    """Tests for the user use cases."""

    @pytest.mark.asyncio
    async def test_register_then_fetch(self, unit_env):
        """A registered profile can be read back by ID."""
        register = await unit_env.get(RegisterUserUseCase)
        get_profile = await unit_env.get(GetUserProfileUseCase)

        created = await register.execute(
            RegisterUserRequest(fullname="Carol Writer", email="carol@example.com")
        )
        fetched = await get_profile.execute(
            GetUserProfileRequest(user_id=created.user_id)
        )

        assert fetched == created
        assert fetched.username == "carol"

    @pytest.mark.asyncio
    async def test_unknown_user_returns_none(self, unit_env):
        """Unknown IDs produce no profile."""
        get_profile = await unit_env.get(GetUserProfileUseCase)

        assert (
            await get_profile.execute(GetUserProfileRequest(user_id=str(uuid4())))
            is None
        )
