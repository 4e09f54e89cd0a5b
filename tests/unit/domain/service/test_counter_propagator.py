"""Unit tests for CounterPropagator."""

from uuid import uuid4

import pytest

from blogsphere.config import CommentSettings
from blogsphere.domain.error import BrokenReplyChainError
from blogsphere.domain.repository import BlogRepository, CommentRepository
from blogsphere.domain.service import CounterPropagator
from blogsphere.domain.value import CommentId
from tests.conftest import make_blog, make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class RecordingCommentRepository:
    """Wraps a comment repository and records every increment."""

    def __init__(self, inner: CommentRepository) -> None:
        self.inner = inner
        self.increments: list[tuple[CommentId, int]] = []

    async def increment_total_replies(self, comment_id, delta):
        self.increments.append((comment_id, delta))
        return await self.inner.increment_total_replies(comment_id, delta)

    def __getattr__(self, name):
        return getattr(self.inner, name)


async def seed_thread(comment_repo, blog_repo):
    """Store blog <- A <- B <- C with consistent counters.

    A has 2 replies below it, B has 1, C none; the blog counts 3 comments,
    1 of them top-level.
    """
    blog = await blog_repo.save(make_blog())
    a = make_comment(blog, total_replies=2, age_seconds=30)
    b = make_comment(blog, parent=a, total_replies=1, age_seconds=20)
    c = make_comment(blog, parent=b, age_seconds=10)
    for comment in (a, b, c):
        await comment_repo.save(comment)
    blog = await blog_repo.increment_activity(
        blog.id, total_comments=3, total_parent_comments=1
    )
    return blog, a, b, c


class TestRecordReply:
    """Tests for record_reply."""

    @pytest.mark.asyncio
    async def test_reply_increments_full_ancestor_chain(self, unit_env):
        """A reply to C adds one to C, B and A and one comment to the blog."""
        propagator = await unit_env.get(CounterPropagator)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        blog, a, b, c = await seed_thread(comment_repo, blog_repo)

        d = make_comment(blog, parent=c)
        await comment_repo.save(d)
        result = await propagator.record_reply(c.id, blog.id)

        assert (await comment_repo.find_by_id(c.id)).total_replies == 1
        assert (await comment_repo.find_by_id(b.id)).total_replies == 2
        assert (await comment_repo.find_by_id(a.id)).total_replies == 3
        assert (await comment_repo.find_by_id(d.id)).total_replies == 0
        assert result.touched == [c.id, b.id, a.id]
        assert result.delta == 1
        assert result.blog.activity.total_comments == 4
        assert result.blog.activity.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_reply_to_top_level_touches_only_parent(self, unit_env):
        """The walk stops at a comment without parent_id."""
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        recorder = RecordingCommentRepository(comment_repo)
        propagator = CounterPropagator(recorder, blog_repo, CommentSettings())

        blog = await blog_repo.save(make_blog())
        a = make_comment(blog)
        await comment_repo.save(a)

        result = await propagator.record_reply(a.id, blog.id)

        assert recorder.increments == [(a.id, 1)]
        assert result.touched == [a.id]
        assert result.blog.activity.total_comments == 1

    @pytest.mark.asyncio
    async def test_missing_ancestor_stops_silently(self, unit_env):
        """A reply whose grandparent is gone only updates what exists."""
        propagator = await unit_env.get(CounterPropagator)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(make_blog())
        ghost = make_comment(blog)  # never stored
        b = make_comment(blog, parent=ghost)
        await comment_repo.save(b)

        result = await propagator.record_reply(b.id, blog.id)

        assert result.touched == [b.id]
        assert (await comment_repo.find_by_id(b.id)).total_replies == 1
        assert result.blog.activity.total_comments == 1

    @pytest.mark.asyncio
    async def test_missing_ancestor_raises_in_strict_mode(self, unit_env):
        """Strict ancestor chains turn a gap into an error."""
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        propagator = CounterPropagator(
            comment_repo,
            blog_repo,
            CommentSettings(strict_ancestor_chain=True, cascade_delete_replies=True),
        )

        blog = await blog_repo.save(make_blog())
        ghost = make_comment(blog)
        b = make_comment(blog, parent=ghost)
        await comment_repo.save(b)

        with pytest.raises(BrokenReplyChainError) as exc_info:
            await propagator.record_reply(b.id, blog.id)

        assert exc_info.value.missing_id == str(ghost.id)
        assert exc_info.value.walked == 1

    @pytest.mark.asyncio
    async def test_cycle_in_parent_chain_counts_each_comment_once(self, unit_env):
        """Corrupt parent references must not loop forever."""
        propagator = await unit_env.get(CounterPropagator)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_repo.save(make_blog())
        a_id = CommentId(uuid4())
        b = make_comment(blog, parent=None, is_reply=True, parent_id=a_id)
        a = make_comment(blog, parent=b, id=a_id)
        await comment_repo.save(a)
        await comment_repo.save(b)

        result = await propagator.record_reply(a.id, blog.id)

        assert result.touched == [a.id, b.id]
        assert (await comment_repo.find_by_id(a.id)).total_replies == 1
        assert (await comment_repo.find_by_id(b.id)).total_replies == 1


class TestRecordComment:
    """Tests for record_comment."""

    @pytest.mark.asyncio
    async def test_top_level_comment_increments_both_blog_counters(self, unit_env):
        """A top-level comment adds 1 to total_comments and total_parent_comments."""
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        recorder = RecordingCommentRepository(comment_repo)
        propagator = CounterPropagator(recorder, blog_repo, CommentSettings())

        blog = await blog_repo.save(make_blog())

        result = await propagator.record_comment(blog.id)

        assert recorder.increments == []
        assert result.touched == []
        assert result.blog.activity.total_comments == 1
        assert result.blog.activity.total_parent_comments == 1


class TestRecordDeletion:
    """Tests for record_deletion."""

    @pytest.mark.asyncio
    async def test_deleting_leaf_reply_decrements_by_one(self, unit_env):
        """Removing C takes 1 from B, A and the blog."""
        propagator = await unit_env.get(CounterPropagator)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        blog, a, b, c = await seed_thread(comment_repo, blog_repo)

        deleted = await comment_repo.delete(c.id)
        result = await propagator.record_deletion(deleted)

        assert result.delta == -1
        assert result.touched == [b.id, a.id]
        assert (await comment_repo.find_by_id(b.id)).total_replies == 0
        assert (await comment_repo.find_by_id(a.id)).total_replies == 1
        assert result.blog.activity.total_comments == 2
        assert result.blog.activity.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_deleting_top_level_with_two_replies(self, unit_env):
        """Removing A (total_replies=2) takes 3 comments and 1 parent off the blog."""
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        recorder = RecordingCommentRepository(comment_repo)
        propagator = CounterPropagator(recorder, blog_repo, CommentSettings())
        blog, a, b, c = await seed_thread(comment_repo, blog_repo)

        deleted = await comment_repo.delete(a.id)
        result = await propagator.record_deletion(deleted)

        assert result.delta == -3
        assert recorder.increments == []
        assert result.blog.activity.total_comments == 0
        assert result.blog.activity.total_parent_comments == 0

    @pytest.mark.asyncio
    async def test_deleting_mid_tree_reply_removes_its_subtree(self, unit_env):
        """Removing B (total_replies=1) takes 2 from A and from the blog."""
        propagator = await unit_env.get(CounterPropagator)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        blog, a, b, c = await seed_thread(comment_repo, blog_repo)

        deleted = await comment_repo.delete(b.id)
        result = await propagator.record_deletion(deleted)

        assert result.delta == -2
        assert result.touched == [a.id]
        assert (await comment_repo.find_by_id(a.id)).total_replies == 0
        assert result.blog.activity.total_comments == 1
        assert result.blog.activity.total_parent_comments == 1
        # C is orphaned but untouched
        assert (await comment_repo.find_by_id(c.id)).parent_id == b.id
