"""Create blog use case."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field

from blogsphere.domain.error import NotFoundError
from blogsphere.domain.model.blog import BlogContent
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService, UserService
from blogsphere.domain.value import TagName, UserId

from .common import BlogItem


class CreateBlogRequest(BaseModel):
    """Create blog request."""

    author_id: str  # User ID from authenticated user
    title: str
    is_draft: bool = False
    description: str | None = None
    content: dict[str, Any] | None = None  # {"blocks": [...]}
    cover_img_url: str | None = None
    tags: list[str] = Field(default_factory=list)


class CreateBlogUseCase:
    """Use case for writing a new blog or draft."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        transaction: Transaction,
    ) -> None:
        """Initialize create blog use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: CreateBlogRequest) -> BlogItem:
        """Execute create blog flow.

        Steps:
        1. Verify the author exists
        2. Save the blog under a fresh slug
        3. Count it on the author if it is published

        Args:
            request: Create blog request

        Returns:
            Created blog

        Raises:
            NotFoundError: If the author doesn't exist
            ValueError: If the blog is invalid (e.g. published without tags)
        """
        async with self.transaction:
            author_id = UserId(UUID(request.author_id))

            author = await self.user_service.get_user_by_id(author_id)
            if author is None:
                raise NotFoundError("User", request.author_id)

            blog = await self.blog_service.create_blog(
                author_id=author_id,
                title=request.title,
                is_draft=request.is_draft,
                description=request.description,
                content=(
                    BlogContent.model_validate(request.content)
                    if request.content is not None
                    else None
                ),
                cover_img_url=request.cover_img_url,
                tags=[TagName(tag) for tag in request.tags],
            )

            if not blog.is_draft:
                await self.user_service.adjust_total_posts(author_id, 1)

            return BlogItem.from_blog(blog)
