"""List comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from blogsphere.config import PaginationSettings
from blogsphere.domain.service import CommentService
from blogsphere.domain.value import BlogId, CommentId

from .common import CommentItem


class ListCommentsRequest(BaseModel):
    """List comments request.

    With ``comment_id`` the direct replies of that comment are listed,
    otherwise the top-level comments (of ``blog_id`` when given).
    """

    blog_id: str | None = None
    comment_id: str | None = None
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)


class ListCommentsResponse(BaseModel):
    """Paginated list of comments."""

    count: int
    next: int | None
    previous: int | None
    results: list[CommentItem]


class ListCommentsUseCase:
    """Use case for paginating comments, newest first."""

    def __init__(
        self,
        comment_service: CommentService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            pagination_settings: Page size defaults and limits
        """
        self.comment_service = comment_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        Args:
            request: List comments request

        Returns:
            One page of comments with neighbouring page numbers
        """
        page_size = min(
            request.page_size or self.pagination_settings.default_page_size,
            self.pagination_settings.max_page_size,
        )
        offset = (request.page - 1) * page_size

        with logfire.span(
            "list_comments.execute",
            blog_id=request.blog_id,
            comment_id=request.comment_id,
            page=request.page,
            page_size=page_size,
        ):
            comments, total = await self.comment_service.list_comments(
                blog_id=BlogId(UUID(request.blog_id)) if request.blog_id else None,
                parent_id=(
                    CommentId(UUID(request.comment_id)) if request.comment_id else None
                ),
                limit=page_size,
                offset=offset,
            )

            return ListCommentsResponse(
                count=total,
                next=request.page + 1 if offset + page_size < total else None,
                previous=request.page - 1 if request.page > 1 else None,
                results=[CommentItem.from_comment(c) for c in comments],
            )
