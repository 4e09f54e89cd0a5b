"""Update blog use case."""

from typing import Any
from uuid import UUID

import logfire
from pydantic import BaseModel

from blogsphere.domain.error import NotAuthorizedError, NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService, UserService
from blogsphere.domain.value import Slug, UserId

from .common import BlogItem

_EDITABLE_FIELDS = (
    "title",
    "description",
    "content",
    "cover_img_url",
    "tags",
    "is_draft",
)


class UpdateBlogRequest(BaseModel):
    """Update blog request.

    Only the fields that are explicitly set are changed.
    """

    slug: str
    user_id: str  # Current user ID (must be author)
    title: str | None = None
    description: str | None = None
    content: dict[str, Any] | None = None
    cover_img_url: str | None = None
    tags: list[str] | None = None
    is_draft: bool | None = None


class UpdateBlogUseCase:
    """Use case for editing, publishing or unpublishing a blog."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        transaction: Transaction,
    ) -> None:
        """Initialize update blog use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: UpdateBlogRequest) -> BlogItem:
        """Execute update blog flow.

        Publishing a draft adds one to the author's total_posts, turning a
        published blog back into a draft removes one.

        Raises:
            NotFoundError: If the blog doesn't exist
            NotAuthorizedError: If the user isn't the author
            ValueError: If the updated blog is invalid
        """
        async with self.transaction:
            user_id = UserId(UUID(request.user_id))

            blog = await self.blog_service.get_blog_by_slug(Slug(request.slug))
            if blog is None:
                raise NotFoundError("Blog", request.slug)

            if blog.author_id != user_id:
                raise NotAuthorizedError("edit", "blog", request.slug, request.user_id)

            changes = {
                name: getattr(request, name)
                for name in _EDITABLE_FIELDS
                if name in request.model_fields_set
                and getattr(request, name) is not None
            }
            if not changes:
                return BlogItem.from_blog(blog)

            updated = await self.blog_service.update_blog(blog, changes)

            if blog.is_draft != updated.is_draft:
                delta = 1 if blog.is_draft else -1
                logfire.info(
                    "Blog publication state changed",
                    blog_id=str(blog.id),
                    is_draft=updated.is_draft,
                )
                await self.user_service.adjust_total_posts(blog.author_id, delta)

            return BlogItem.from_blog(updated)
