"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.error import NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import BlogService, CommentService
from blogsphere.domain.value import BlogId, UserId

from .common import BlogSummaryItem, CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: str  # UUID string
    content: str
    author_id: str  # User ID from authenticated user


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem
    blog: BlogSummaryItem | None


class CreateCommentUseCase:
    """Use case for adding a top-level comment to a blog."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        transaction: Transaction,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.transaction = transaction

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the blog exists
        2. Save the comment and count it on the blog

        Args:
            request: Create comment request

        Returns:
            The new comment and the blog's updated counters

        Raises:
            NotFoundError: If the blog doesn't exist
            ValueError: If an ID is malformed or the content is invalid
        """
        async with self.transaction:
            blog_id = BlogId(UUID(request.blog_id))

            blog = await self.blog_service.get_blog_by_id(blog_id)
            if blog is None:
                raise NotFoundError("Blog", request.blog_id)

            mutation = await self.comment_service.create_comment(
                blog=blog,
                author_id=UserId(UUID(request.author_id)),
                content=request.content,
            )

            return CreateCommentResponse(
                comment=CommentItem.from_comment(mutation.comment),
                blog=BlogSummaryItem.from_blog(mutation.propagation.blog),
            )
