"""Comment domain service."""

from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

import logfire

from blogsphere.config import CommentSettings
from blogsphere.domain.error import StorageOperationError
from blogsphere.domain.model.blog import Blog
from blogsphere.domain.model.comment import Comment
from blogsphere.domain.repository import CommentRepository
from blogsphere.domain.value import BlogId, CommentId, UserId

from .base import Service
from .counter_propagator import CounterPropagator, PropagationResult


def _clean_content(content: str) -> str:
    """Trim surrounding whitespace; blank content is never stored."""
    content = content.strip()
    if not content:
        raise ValueError("Comment content cannot be empty")
    return content


@dataclass
class CommentMutation:
    """A comment that was created or deleted, with its counter effects."""

    comment: Comment
    propagation: PropagationResult


class CommentService(Service):
    """Domain service for comment operations.

    Every operation that changes the shape of a comment tree goes through
    the counter propagator before returning.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        counter_propagator: CounterPropagator,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            counter_propagator: Counter propagation service
            comment_settings: Comment tree behaviour settings
        """
        self.comment_repository = comment_repository
        self.counter_propagator = counter_propagator
        self.cascade_delete_replies = comment_settings.cascade_delete_replies

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def create_comment(
        self, blog: Blog, author_id: UserId, content: str
    ) -> CommentMutation:
        """Create a top-level comment on a blog.

        Args:
            blog: Blog being commented on
            author_id: Author user ID
            content: Comment content

        Returns:
            The saved comment and the updated blog counters

        Raises:
            ValueError: If the content is blank
        """
        content = _clean_content(content)
        with logfire.span(
            "comment_service.create_comment",
            blog_id=str(blog.id),
            author_id=str(author_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                blog_id=blog.id,
                blog_author_id=blog.author_id,
                author_id=author_id,
                content=content,
                is_reply=False,
                parent_id=None,
                total_replies=0,
                is_edited=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            propagation = await self.counter_propagator.record_comment(blog.id)

            logfire.info(
                "Comment created", comment_id=str(saved.id), blog_id=str(blog.id)
            )
            return CommentMutation(comment=saved, propagation=propagation)

    async def create_reply(
        self, parent: Comment, author_id: UserId, content: str
    ) -> CommentMutation:
        """Reply to an existing comment.

        The reply inherits the blog of its parent. Every ancestor's
        total_replies grows by one.

        Args:
            parent: Comment being replied to
            author_id: Author user ID
            content: Reply content

        Returns:
            The saved reply and the propagation result

        Raises:
            ValueError: If the content is blank
        """
        content = _clean_content(content)
        with logfire.span(
            "comment_service.create_reply",
            parent_id=str(parent.id),
            blog_id=str(parent.blog_id),
            author_id=str(author_id),
        ):
            now = datetime.now()
            reply = Comment(
                id=CommentId(uuid4()),
                blog_id=parent.blog_id,
                blog_author_id=parent.blog_author_id,
                author_id=author_id,
                content=content,
                is_reply=True,
                parent_id=parent.id,
                total_replies=0,
                is_edited=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(reply)
            propagation = await self.counter_propagator.record_reply(
                parent.id, parent.blog_id
            )

            logfire.info(
                "Reply created",
                comment_id=str(saved.id),
                parent_id=str(parent.id),
                ancestors_updated=len(propagation.touched),
            )
            return CommentMutation(comment=saved, propagation=propagation)

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Overwrite a comment's content and flag it as edited.

        No counters change.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            ValueError: If the content is blank
            StorageOperationError: If the comment vanished before the update
        """
        content = _clean_content(content)
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content),
        ):
            updated = await self.comment_repository.update_content(
                comment_id, content
            )
            if updated is None:
                logfire.error(
                    "Comment disappeared before update", comment_id=str(comment_id)
                )
                raise StorageOperationError(f"Failed to update comment {comment_id}")

            logfire.info("Comment content updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment: Comment) -> CommentMutation:
        """Delete a comment and take its subtree out of every counter.

        The counters are corrected from the record returned by the delete
        itself, i.e. the total_replies the comment had at the moment it was
        removed.

        Descendant records stay in storage unless cascade deletion is
        enabled.

        Args:
            comment: Comment to delete

        Returns:
            The deleted comment and the propagation result

        Raises:
            StorageOperationError: If the store reports nothing was deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
            cascade=self.cascade_delete_replies,
        ):
            descendant_ids: list[CommentId] = []
            if self.cascade_delete_replies:
                descendant_ids = await self.comment_repository.find_descendant_ids(
                    comment.id
                )

            deleted = await self.comment_repository.delete(comment.id)
            if deleted is None:
                logfire.error(
                    "Comment delete reported no row", comment_id=str(comment.id)
                )
                raise StorageOperationError(f"Failed to delete comment {comment.id}")

            if descendant_ids:
                removed = await self.comment_repository.delete_many(descendant_ids)
                logfire.info(
                    "Descendant comments deleted",
                    comment_id=str(comment.id),
                    count=removed,
                )

            propagation = await self.counter_propagator.record_deletion(deleted)

            logfire.info(
                "Comment deleted",
                comment_id=str(comment.id),
                total_replies=deleted.total_replies,
            )
            return CommentMutation(comment=deleted, propagation=propagation)

    async def list_comments(
        self,
        blog_id: BlogId | None = None,
        parent_id: CommentId | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Comment], int]:
        """List top-level comments, or the direct replies of ``parent_id``.

        Args:
            blog_id: Restrict top-level comments to one blog
            parent_id: List replies of this comment instead
            limit: Page size
            offset: Number of items to skip

        Returns:
            The page of comments and the total count
        """
        with logfire.span(
            "comment_service.list_comments",
            blog_id=str(blog_id) if blog_id else None,
            parent_id=str(parent_id) if parent_id else None,
            limit=limit,
            offset=offset,
        ):
            if parent_id is not None:
                total = await self.comment_repository.count_children(parent_id)
                comments = (
                    await self.comment_repository.find_children(
                        parent_id, limit=limit, offset=offset
                    )
                    if total
                    else []
                )
            else:
                total = await self.comment_repository.count_top_level(blog_id)
                comments = (
                    await self.comment_repository.find_top_level(
                        blog_id, limit=limit, offset=offset
                    )
                    if total
                    else []
                )

            logfire.info("Comments listed", count=len(comments), total=total)
            return comments, total

    async def delete_comments_for_blog(self, blog_id: BlogId) -> int:
        """Delete every comment and reply of a blog.

        Args:
            blog_id: Blog ID

        Returns:
            Number of comments deleted
        """
        with logfire.span(
            "comment_service.delete_comments_for_blog", blog_id=str(blog_id)
        ):
            removed = await self.comment_repository.delete_by_blog(blog_id)
            logfire.info("Blog comments deleted", blog_id=str(blog_id), count=removed)
            return removed
