"""Create reply use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.error import NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import CommentService
from blogsphere.domain.value import CommentId, UserId

from .common import BlogSummaryItem, CommentItem


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    comment_id: str  # Parent comment UUID string
    content: str
    author_id: str  # User ID from authenticated user


class CreateReplyResponse(BaseModel):
    """Create reply response."""

    comment: CommentItem
    blog: BlogSummaryItem | None
    ancestors_updated: list[str]


class CreateReplyUseCase:
    """Use case for replying to an existing comment."""

    def __init__(
        self,
        comment_service: CommentService,
        transaction: Transaction,
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.comment_service = comment_service
        self.transaction = transaction

    async def execute(self, request: CreateReplyRequest) -> CreateReplyResponse:
        """Execute create reply flow.

        The reply is saved under the parent's blog and every ancestor's
        reply counter grows by one.

        Args:
            request: Create reply request

        Returns:
            The new reply, the blog's counters and the updated ancestors

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValueError: If an ID is malformed or the content is invalid
        """
        async with self.transaction:
            parent_id = CommentId(UUID(request.comment_id))

            parent = await self.comment_service.get_comment_by_id(parent_id)
            if parent is None:
                raise NotFoundError("Comment", request.comment_id)

            mutation = await self.comment_service.create_reply(
                parent=parent,
                author_id=UserId(UUID(request.author_id)),
                content=request.content,
            )

            return CreateReplyResponse(
                comment=CommentItem.from_comment(mutation.comment),
                blog=BlogSummaryItem.from_blog(mutation.propagation.blog),
                ancestors_updated=[str(cid) for cid in mutation.propagation.touched],
            )
