"""Delete comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blogsphere.domain.error import NotAuthorizedError, NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import CommentService
from blogsphere.domain.value import CommentId, UserId

from .common import BlogSummaryItem, CommentItem


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (comment author or blog author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment: CommentItem  # The comment as it was when removed
    blog: BlogSummaryItem | None
    removed_count: int  # Comments taken out of the counters
    ancestors_updated: list[str]


class DeleteCommentUseCase:
    """Use case for deleting a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        transaction: Transaction,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.comment_service = comment_service
        self.transaction = transaction

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Steps:
        1. Load the comment
        2. Check the user wrote the comment or the blog
        3. Delete it and take its subtree out of every counter

        Args:
            request: Delete comment request

        Returns:
            The deleted comment and the counters after deletion

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user wrote neither the comment nor the blog
        """
        async with self.transaction:
            comment_id = CommentId(UUID(request.comment_id))
            user_id = UserId(UUID(request.user_id))

            comment = await self.comment_service.get_comment_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", request.comment_id)

            if user_id not in (comment.author_id, comment.blog_author_id):
                logfire.warn(
                    "Comment deletion refused",
                    comment_id=request.comment_id,
                    user_id=request.user_id,
                )
                raise NotAuthorizedError(
                    "delete", "comment", request.comment_id, request.user_id
                )

            mutation = await self.comment_service.delete_comment(comment)

            return DeleteCommentResponse(
                comment=CommentItem.from_comment(mutation.comment),
                blog=BlogSummaryItem.from_blog(mutation.propagation.blog),
                removed_count=-mutation.propagation.delta,
                ancestors_updated=[str(cid) for cid in mutation.propagation.touched],
            )
