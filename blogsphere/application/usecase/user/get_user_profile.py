"""Get user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.service import UserService
from blogsphere.domain.value import UserId

from .common import UserProfileItem


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    user_id: str


class GetUserProfileUseCase:
    """Use case for getting a user's public profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserProfileItem | None:
        """Execute get user profile flow.

        Returns:
            User profile if the user exists, None otherwise
        """
        user = await self.user_service.get_user_by_id(UserId(UUID(request.user_id)))
        if not user:
            return None
        return UserProfileItem.from_user(user)
