"""User use cases."""

from .common import UserProfileItem
from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
    "UserProfileItem",
]
