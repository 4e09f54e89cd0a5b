"""Toggle like use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.error import NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService
from blogsphere.domain.value import Slug, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    slug: str
    user_id: str  # Current user ID


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    slug: str
    liked: bool
    total_likes: int


class ToggleLikeUseCase:
    """Use case for liking a blog, or removing an existing like."""

    def __init__(
        self,
        blog_service: BlogService,
        transaction: Transaction,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            blog_service: Blog domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.blog_service = blog_service
        self.transaction = transaction

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Raises:
            NotFoundError: If no published blog has this slug
        """
        async with self.transaction:
            blog = await self.blog_service.get_blog_by_slug(Slug(request.slug))
            if blog is None or blog.is_draft:
                raise NotFoundError("Blog", request.slug)

            updated, liked = await self.blog_service.toggle_like(
                blog, UserId(UUID(request.user_id))
            )
            return ToggleLikeResponse(
                slug=str(updated.slug),
                liked=liked,
                total_likes=updated.activity.total_likes,
            )
