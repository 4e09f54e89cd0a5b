"""Blog routes."""

from typing import Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from blogsphere.application.usecase.blog import (
    BlogItem,
    CreateBlogRequest,
    CreateBlogUseCase,
    DeleteBlogRequest,
    DeleteBlogResponse,
    DeleteBlogUseCase,
    GetBlogRequest,
    GetBlogResponse,
    GetBlogUseCase,
    IncrementReadCountRequest,
    IncrementReadCountResponse,
    IncrementReadCountUseCase,
    ListBlogsRequest,
    ListBlogsResponse,
    ListBlogsUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    UpdateBlogRequest,
    UpdateBlogUseCase,
)
from blogsphere.domain.error import AlreadyExistsError, NotAuthorizedError, NotFoundError
from blogsphere.domain.service import JWTService

router = APIRouter(prefix="/blogs", tags=["blogs"], route_class=DishkaRoute)


def _require_user_id(jwt_service: JWTService, auth_token: str | None, action: str) -> str:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
        )
    return user_id


@router.get("", response_model=ListBlogsResponse)
async def list_blogs(
    list_blogs_use_case: FromDishka[ListBlogsUseCase],
    jwt_service: FromDishka[JWTService],
    tag: str | None = Query(default=None),
    author_id: str | None = Query(default=None),
    is_draft: bool = Query(default=False),
    page: int = Query(default=1, ge=1),
    page_size: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> ListBlogsResponse:
    """List published blogs, newest first.

    ``is_draft=true`` lists the current user's drafts instead.
    """
    try:
        return await list_blogs_use_case.execute(
            ListBlogsRequest(
                tag=tag,
                author_id=author_id,
                is_draft=is_draft,
                page=page,
                page_size=page_size,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except NotAuthorizedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


class CreateBlogAPIRequest(BaseModel):
    """API request for creating a blog."""

    title: str = Field(min_length=1, max_length=300)
    is_draft: bool = False
    description: str | None = Field(default=None, max_length=200)
    content: dict[str, Any] | None = None
    cover_img_url: str | None = None
    tags: list[str] = Field(default_factory=list, max_length=10)


@router.post("", response_model=BlogItem, status_code=status.HTTP_201_CREATED)
async def create_blog(
    request: CreateBlogAPIRequest,
    create_blog_use_case: FromDishka[CreateBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BlogItem:
    """Write a blog or save a draft.

    Requires authentication. Published blogs need a description, content
    and at least one tag.
    """
    user_id = _require_user_id(jwt_service, auth_token, "write blogs")

    try:
        return await create_blog_use_case.execute(
            CreateBlogRequest(author_id=user_id, **request.model_dump())
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except AlreadyExistsError as e:
        logfire.error("Could not allocate blog slug", error=str(e))
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{slug}", response_model=GetBlogResponse)
async def get_blog(
    slug: str,
    get_blog_use_case: FromDishka[GetBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetBlogResponse:
    """Get a blog by slug.

    If authenticated, includes whether the user likes it.
    """
    try:
        return await get_blog_use_case.execute(
            GetBlogRequest(
                slug=slug, user_id=jwt_service.get_user_id_from_token(auth_token)
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


class UpdateBlogAPIRequest(BaseModel):
    """API request for updating a blog. Omitted fields stay unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=300)
    description: str | None = Field(default=None, max_length=200)
    content: dict[str, Any] | None = None
    cover_img_url: str | None = None
    tags: list[str] | None = Field(default=None, max_length=10)
    is_draft: bool | None = None


@router.patch("/{slug}", response_model=BlogItem)
async def update_blog(
    slug: str,
    request: UpdateBlogAPIRequest,
    update_blog_use_case: FromDishka[UpdateBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> BlogItem:
    """Edit, publish or unpublish a blog.

    Only the author can edit.
    """
    user_id = _require_user_id(jwt_service, auth_token, "edit blogs")

    try:
        return await update_blog_use_case.execute(
            UpdateBlogRequest(
                slug=slug,
                user_id=user_id,
                **request.model_dump(exclude_unset=True),
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this blog",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/{slug}", response_model=DeleteBlogResponse)
async def delete_blog(
    slug: str,
    delete_blog_use_case: FromDishka[DeleteBlogUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteBlogResponse:
    """Delete a blog with all of its comments.

    Only the author can delete.
    """
    user_id = _require_user_id(jwt_service, auth_token, "delete blogs")

    try:
        return await delete_blog_use_case.execute(
            DeleteBlogRequest(slug=slug, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized blog deletion attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this blog",
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error deleting blog", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete blog",
        )


@router.patch("/{slug}/read-count", response_model=IncrementReadCountResponse)
async def increment_read_count(
    slug: str,
    increment_read_count_use_case: FromDishka[IncrementReadCountUseCase],
) -> IncrementReadCountResponse:
    """Record one read of a blog (also counted on its author)."""
    try:
        return await increment_read_count_use_case.execute(
            IncrementReadCountRequest(slug=slug)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.patch("/{slug}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    slug: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ToggleLikeResponse:
    """Like a blog, or take back an existing like.

    Requires authentication.
    """
    user_id = _require_user_id(jwt_service, auth_token, "like blogs")

    try:
        return await toggle_like_use_case.execute(
            ToggleLikeRequest(slug=slug, user_id=user_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
