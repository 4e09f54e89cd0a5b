"""Register user use case."""

from pydantic import BaseModel

from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import UserService

from .common import UserProfileItem


class RegisterUserRequest(BaseModel):
    """Register user request."""

    fullname: str
    email: str


class RegisterUserUseCase:
    """Use case for creating a user profile."""

    def __init__(
        self,
        user_service: UserService,
        transaction: Transaction,
    ) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: RegisterUserRequest) -> UserProfileItem:
        """Execute register user flow.

        Credentials stay with the identity provider; this only records the
        profile and picks a free username.

        Raises:
            AlreadyExistsError: If the email is already registered
            ValueError: If the full name is invalid
        """
        async with self.transaction:
            user = await self.user_service.register_user(
                fullname=request.fullname, email=request.email
            )
            return UserProfileItem.from_user(user)
