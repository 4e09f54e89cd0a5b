"""Get blog use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.error import NotFoundError
from blogsphere.domain.service import BlogService
from blogsphere.domain.value import Slug, UserId

from .common import BlogItem


class GetBlogRequest(BaseModel):
    """Get blog request."""

    slug: str
    user_id: str | None = None  # Current user ID (if authenticated)


class GetBlogResponse(BlogItem):
    """Blog with the viewer's like state."""

    liked: bool


class GetBlogUseCase:
    """Use case for reading a blog by slug."""

    def __init__(self, blog_service: BlogService) -> None:
        """Initialize get blog use case.

        Args:
            blog_service: Blog domain service
        """
        self.blog_service = blog_service

    async def execute(self, request: GetBlogRequest) -> GetBlogResponse:
        """Execute get blog flow.

        Drafts are only visible to their author.

        Raises:
            NotFoundError: If no visible blog has this slug
        """
        blog = await self.blog_service.get_blog_by_slug(Slug(request.slug))
        user_id = UserId(UUID(request.user_id)) if request.user_id else None

        if blog is None or (blog.is_draft and blog.author_id != user_id):
            raise NotFoundError("Blog", request.slug)

        liked = False
        if user_id is not None:
            liked = await self.blog_service.has_like(blog.id, user_id)

        return GetBlogResponse(**BlogItem.from_blog(blog).model_dump(), liked=liked)
