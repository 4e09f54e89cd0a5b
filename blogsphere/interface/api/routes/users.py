"""User profile routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from blogsphere.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
    UserProfileItem,
)
from blogsphere.domain.error import AlreadyExistsError, NotFoundError
from blogsphere.domain.service import JWTService

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class RegisterUserAPIRequest(BaseModel):
    """API request for registering a user profile."""

    fullname: str = Field(min_length=2, max_length=50)
    email: str = Field(min_length=5, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")


class SocialLinksAPIRequest(BaseModel):
    """Social links to change. Omitted links are kept, "" removes one."""

    model_config = ConfigDict(extra="forbid")

    youtube: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    twitter: str | None = None
    github: str | None = None
    website: str | None = None


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for a partial profile update."""

    fullname: str | None = Field(default=None, min_length=2, max_length=50)
    bio: str | None = Field(default=None, max_length=200)
    profile_image: str | None = None
    social_links: SocialLinksAPIRequest | None = None


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    limit: int = Query(default=10, ge=1, le=100),
) -> ListUsersResponse:
    """List user profiles, newest first."""
    return await list_users_use_case.execute(ListUsersRequest(limit=limit))


@router.post("", response_model=UserProfileItem, status_code=status.HTTP_201_CREATED)
async def register_user(
    request: RegisterUserAPIRequest,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> UserProfileItem:
    """Create the profile of a user known to the identity provider."""
    try:
        return await register_user_use_case.execute(
            RegisterUserRequest(fullname=request.fullname, email=request.email)
        )
    except AlreadyExistsError as e:
        logfire.warn("User registration rejected", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("", response_model=UserProfileItem)
async def update_user_profile(
    request: UpdateUserProfileAPIRequest,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UserProfileItem:
    """Update the current user's profile.

    Requires authentication. Only the fields present in the body change;
    social links are merged with the stored ones.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to update your profile",
        )

    social_links = (
        request.social_links.model_dump(exclude_none=True)
        if request.social_links
        else None
    )
    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(
                user_id=user_id,
                fullname=request.fullname,
                bio=request.bio,
                profile_image=request.profile_image,
                social_links=social_links,
            )
        )
    except NotFoundError as e:
        logfire.warn("Profile update failed - user not found", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating profile", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile",
        )


@router.get("/{user_id}", response_model=UserProfileItem)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserProfileItem:
    """Get a user's public profile.

    Raises:
        HTTPException: If the user is not found
    """
    try:
        user_profile = await get_user_profile_use_case.execute(
            GetUserProfileRequest(user_id=user_id)
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    if not user_profile:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User '{user_id}' not found",
        )

    return user_profile
