"""Delete blog use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.error import NotAuthorizedError, NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService, CommentService, UserService
from blogsphere.domain.value import Slug, UserId


class DeleteBlogRequest(BaseModel):
    """Delete blog request."""

    slug: str
    user_id: str  # Current user ID (must be author)


class DeleteBlogResponse(BaseModel):
    """Delete blog response."""

    blog_id: str
    slug: str
    comments_deleted: int


class DeleteBlogUseCase:
    """Use case for deleting a blog together with its comments."""

    def __init__(
        self,
        blog_service: BlogService,
        comment_service: CommentService,
        user_service: UserService,
        transaction: Transaction,
    ) -> None:
        """Initialize delete blog use case.

        Args:
            blog_service: Blog domain service
            comment_service: Comment domain service
            user_service: User domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.blog_service = blog_service
        self.comment_service = comment_service
        self.user_service = user_service
        self.transaction = transaction

    async def execute(self, request: DeleteBlogRequest) -> DeleteBlogResponse:
        """Execute delete blog flow.

        Raises:
            NotFoundError: If the blog doesn't exist
            NotAuthorizedError: If the user isn't the author
        """
        async with self.transaction:
            user_id = UserId(UUID(request.user_id))

            blog = await self.blog_service.get_blog_by_slug(Slug(request.slug))
            if blog is None:
                raise NotFoundError("Blog", request.slug)

            if blog.author_id != user_id:
                raise NotAuthorizedError(
                    "delete", "blog", request.slug, request.user_id
                )

            removed = await self.comment_service.delete_comments_for_blog(blog.id)
            await self.blog_service.delete_blog(blog.id)

            if not blog.is_draft:
                await self.user_service.adjust_total_posts(blog.author_id, -1)

            return DeleteBlogResponse(
                blog_id=str(blog.id), slug=str(blog.slug), comments_deleted=removed
            )
