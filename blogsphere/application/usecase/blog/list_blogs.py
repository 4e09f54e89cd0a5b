"""List blogs use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from blogsphere.config import PaginationSettings
from blogsphere.domain.error import NotAuthorizedError
from blogsphere.domain.service import BlogService
from blogsphere.domain.value import TagName, UserId

from .common import BlogItem


class ListBlogsRequest(BaseModel):
    """List blogs request."""

    tag: str | None = None
    author_id: str | None = None
    is_draft: bool = False
    page: int = Field(default=1, ge=1)
    page_size: int | None = Field(default=None, ge=1)
    user_id: str | None = None  # Current user ID (if authenticated)


class ListBlogsResponse(BaseModel):
    """Paginated list of blogs."""

    count: int
    next: int | None
    previous: int | None
    results: list[BlogItem]


class ListBlogsUseCase:
    """Use case for listing blogs with filtering and pagination."""

    def __init__(
        self,
        blog_service: BlogService,
        pagination_settings: PaginationSettings,
    ) -> None:
        """Initialize list blogs use case.

        Args:
            blog_service: Blog domain service
            pagination_settings: Page size defaults and limits
        """
        self.blog_service = blog_service
        self.pagination_settings = pagination_settings

    async def execute(self, request: ListBlogsRequest) -> ListBlogsResponse:
        """Execute list blogs flow.

        Drafts can only be listed by their author, so listing drafts
        always filters on the current user.

        Raises:
            NotAuthorizedError: If drafts are requested anonymously or for
                another author
        """
        author_id = UserId(UUID(request.author_id)) if request.author_id else None
        if request.is_draft:
            user_id = UserId(UUID(request.user_id)) if request.user_id else None
            if user_id is None or (author_id is not None and author_id != user_id):
                raise NotAuthorizedError(
                    "list drafts of",
                    "user",
                    request.author_id or "",
                    request.user_id or "anonymous",
                )
            author_id = user_id

        page_size = min(
            request.page_size or self.pagination_settings.default_page_size,
            self.pagination_settings.max_page_size,
        )
        offset = (request.page - 1) * page_size

        with logfire.span(
            "list_blogs.execute",
            tag=request.tag,
            is_draft=request.is_draft,
            page=request.page,
            page_size=page_size,
        ):
            blogs, total = await self.blog_service.list_blogs(
                tag=TagName(request.tag) if request.tag else None,
                author_id=author_id,
                is_draft=request.is_draft,
                limit=page_size,
                offset=offset,
            )

            return ListBlogsResponse(
                count=total,
                next=request.page + 1 if offset + page_size < total else None,
                previous=request.page - 1 if request.page > 1 else None,
                results=[BlogItem.from_blog(blog) for blog in blogs],
            )
