"""List users use case."""

from pydantic import BaseModel, Field

from blogsphere.domain.service import UserService

from .common import UserProfileItem


class ListUsersRequest(BaseModel):
    """List users request."""

    limit: int = Field(default=10, ge=1, le=100)


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserProfileItem]


class ListUsersUseCase:
    """Use case for listing user profiles, newest first."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        users = await self.user_service.list_users(limit=request.limit)
        return ListUsersResponse(users=[UserProfileItem.from_user(u) for u in users])
