"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from blogsphere.domain.error import NotAuthorizedError, NotFoundError
from blogsphere.domain.repository import Transaction
from blogsphere.domain.service import CommentService
from blogsphere.domain.value import CommentId, UserId

from .common import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str  # New content (required, cannot be empty)


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        transaction: Transaction,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            transaction: Request transaction, rolled back if the use case fails
        """
        self.comment_service = comment_service
        self.transaction = transaction

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Editing never touches any counter.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user doesn't own the comment
            ValueError: If the new content is blank
        """
        async with self.transaction:
            comment_id = CommentId(UUID(request.comment_id))
            user_id = UserId(UUID(request.user_id))

            comment = await self.comment_service.get_comment_by_id(comment_id)
            if comment is None:
                raise NotFoundError("Comment", request.comment_id)

            if comment.author_id != user_id:
                raise NotAuthorizedError(
                    "edit", "comment", request.comment_id, request.user_id
                )

            updated = await self.comment_service.update_content(
                comment_id, request.content
            )
            return CommentItem.from_comment(updated)
