"""Increment read count use case."""

from pydantic import BaseModel

from blogsphere.domain.error import NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService, UserService
from blogsphere.domain.value import Slug


class IncrementReadCountRequest(BaseModel):
    """Increment read count request."""

    slug: str


class IncrementReadCountResponse(BaseModel):
    """Increment read count response."""

    slug: str
    total_reads: int


class IncrementReadCountUseCase:
    """Use case for recording one read of a blog."""

    def __init__(
        self,
        blog_service: BlogService,
        user_service: UserService,
        transaction: Transaction,
    ) -> None:
        """Initialize increment read count use case.

        Args:
            blog_service: Blog domain service
            user_service: User domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.blog_service = blog_service
        self.user_service = user_service
        self.transaction = transaction

    async def execute(
        self, request: IncrementReadCountRequest
    ) -> IncrementReadCountResponse:
        """Add one read to the blog and one to its author.

        Raises:
            NotFoundError: If the blog doesn't exist
        """
        async with self.transaction:
            blog = await self.blog_service.get_blog_by_slug(Slug(request.slug))
            if blog is None:
                raise NotFoundError("Blog", request.slug)

            updated = await self.blog_service.increment_reads(blog.id)
            if updated is None:
                raise NotFoundError("Blog", request.slug)

            await self.user_service.record_read(blog.author_id)

            return IncrementReadCountResponse(
                slug=str(updated.slug), total_reads=updated.activity.total_reads
            )
