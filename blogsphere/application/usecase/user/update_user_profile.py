"""Update user profile use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import UserService
from blogsphere.domain.value import UserId

from .common import UserProfileItem


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request."""

    user_id: str  # From authenticated user
    fullname: str | None = None
    bio: str | None = None
    profile_image: str | None = None
    social_links: dict[str, str] | None = None


class UpdateUserProfileUseCase:
    """Use case for updating the current user's profile.

    Users can change their full name, bio, profile image and social links.
    Username, email and the account counters cannot be changed here.
    """

    def __init__(
        self,
        user_service: UserService,
        transaction: Transaction,
    ) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileItem:
        """Execute update user profile flow.

        Steps:
        1. Load the user
        2. Apply the fields present in the request
        3. Save and return the updated profile

        Raises:
            NotFoundError: If the user doesn't exist
            ValueError: If a field is invalid
        """
        user_id = UserId(UUID(request.user_id))

        async with self.transaction:
            user = await self.user_service.update_profile(
                user_id,
                fullname=request.fullname,
                bio=request.bio,
                profile_image=request.profile_image,
                social_links=request.social_links,
            )
            return UserProfileItem.from_user(user)
