"""Reply and comment counter propagation.

Keeps two families of counters consistent with the comment tree:

- Comment.total_replies: number of all descendants of a comment. Every new
  reply adds 1 to each comment on its ancestor chain; every deletion removes
  the deleted comment plus its whole subtree from each ancestor.
- Blog.activity.total_comments / total_parent_comments: number of all
  comments of a blog and number of top-level comments.

Each step is an atomic delta applied by the store. The walk up the chain is
an explicit loop because every step needs the parent_id returned by the
previous update. Nothing here catches storage errors: they propagate to the
caller, whose request transaction then rolls back.
"""

from dataclasses import dataclass, field

import logfire

from blogsphere.config import CommentSettings
from blogsphere.domain.error import BrokenReplyChainError
from blogsphere.domain.model.blog import Blog
from blogsphere.domain.model.comment import Comment
from blogsphere.domain.repository import BlogRepository, CommentRepository
from blogsphere.domain.value import BlogId, CommentId

from .base import Service


@dataclass
class PropagationResult:
    """Outcome of one propagation.

    Attributes:
        delta: Signed amount applied to every touched comment and to
            the blog's total_comments
        touched: IDs of the comments whose total_replies changed, from
            the starting comment up to the top-level ancestor
        blog: The blog after its counters were updated (None if missing)
    """

    delta: int
    touched: list[CommentId] = field(default_factory=list)
    blog: Blog | None = None


class CounterPropagator(Service):
    """Domain service applying counter deltas along the comment tree."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        blog_repository: BlogRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize counter propagator.

        Args:
            comment_repository: Comment repository
            blog_repository: Blog repository
            comment_settings: Comment tree behaviour settings
        """
        self.comment_repository = comment_repository
        self.blog_repository = blog_repository
        self.strict_ancestor_chain = comment_settings.strict_ancestor_chain

    async def record_comment(self, blog_id: BlogId) -> PropagationResult:
        """Account for a new top-level comment.

        There is no ancestor chain: only the blog's total_comments and
        total_parent_comments move, each by 1.

        Args:
            blog_id: Blog the comment belongs to

        Returns:
            Propagation result with no touched comments
        """
        with logfire.span("counter_propagator.record_comment", blog_id=str(blog_id)):
            blog = await self.blog_repository.increment_activity(
                blog_id, total_comments=1, total_parent_comments=1
            )
            logfire.info("Top-level comment recorded", blog_id=str(blog_id))
            return PropagationResult(delta=1, blog=blog)

    async def record_reply(
        self, parent_comment_id: CommentId, blog_id: BlogId
    ) -> PropagationResult:
        """Account for a new reply to ``parent_comment_id``.

        Adds 1 to total_replies of the parent and of every ancestor above
        it, then adds 1 to the blog's total_comments. The blog's
        total_parent_comments is left alone.

        The caller must have checked that the parent exists.

        Args:
            parent_comment_id: Comment that was replied to
            blog_id: Blog the comment tree belongs to

        Returns:
            Propagation result listing the updated ancestors
        """
        with logfire.span(
            "counter_propagator.record_reply",
            parent_id=str(parent_comment_id),
            blog_id=str(blog_id),
        ):
            touched = await self._walk_ancestors(parent_comment_id, 1)
            blog = await self.blog_repository.increment_activity(
                blog_id, total_comments=1
            )
            logfire.info(
                "Reply recorded",
                parent_id=str(parent_comment_id),
                ancestors_updated=len(touched),
            )
            return PropagationResult(delta=1, touched=touched, blog=blog)

    async def record_deletion(self, comment: Comment) -> PropagationResult:
        """Account for the deletion of ``comment``.

        ``comment`` must be the record as read before it was deleted: its
        total_replies decides how many comments leave the tree, and that
        value cannot be recovered once the record is gone.

        The deleted comment and all of its descendants are removed from
        every ancestor's total_replies and from the blog's total_comments.
        total_parent_comments drops by 1 only for a top-level comment.

        Args:
            comment: The deleted comment, as stored before deletion

        Returns:
            Propagation result listing the updated ancestors
        """
        decrement_by = -comment.subtree_size
        is_reply = comment.is_reply and comment.parent_id is not None

        with logfire.span(
            "counter_propagator.record_deletion",
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
            decrement_by=decrement_by,
            is_reply=is_reply,
        ):
            touched: list[CommentId] = []
            if is_reply:
                touched = await self._walk_ancestors(comment.parent_id, decrement_by)

            blog = await self.blog_repository.increment_activity(
                comment.blog_id,
                total_comments=decrement_by,
                total_parent_comments=0 if is_reply else -1,
            )
            logfire.info(
                "Comment deletion recorded",
                comment_id=str(comment.id),
                decrement_by=decrement_by,
                ancestors_updated=len(touched),
            )
            return PropagationResult(delta=decrement_by, touched=touched, blog=blog)

    async def _walk_ancestors(
        self, start_id: CommentId, delta: int
    ) -> list[CommentId]:
        """Apply ``delta`` to ``start_id`` and every ancestor above it.

        Stops after the top-level ancestor (no parent_id) or when a lookup
        misses. A miss is silent unless strict ancestor chains are enabled.

        Returns:
            IDs of the updated comments, nearest first
        """
        touched: list[CommentId] = []
        current_id: CommentId | None = start_id

        while current_id is not None:
            if current_id in touched:
                # A cycle in parent references; every comment is counted once.
                logfire.error(
                    "Cycle in comment ancestor chain",
                    start_id=str(start_id),
                    comment_id=str(current_id),
                )
                break

            updated = await self.comment_repository.increment_total_replies(
                current_id, delta
            )
            if updated is None:
                if self.strict_ancestor_chain:
                    logfire.error(
                        "Ancestor comment missing",
                        start_id=str(start_id),
                        missing_id=str(current_id),
                    )
                    raise BrokenReplyChainError(str(current_id), len(touched))
                logfire.warn(
                    "Ancestor comment missing, stopping propagation",
                    start_id=str(start_id),
                    missing_id=str(current_id),
                )
                break

            touched.append(updated.id)
            current_id = updated.parent_id

        return touched
