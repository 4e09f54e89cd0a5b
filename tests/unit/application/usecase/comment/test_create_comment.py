"""Unit tests for CreateCommentUseCase and CreateReplyUseCase."""

from uuid import UUID, uuid4

import pytest

from blogsphere.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    CreateReplyRequest,
    CreateReplyUseCase,
)
from blogsphere.domain.error import NotFoundError
from blogsphere.domain.repository import BlogRepository, CommentRepository, Transaction
from blogsphere.domain.value import CommentId
from tests.conftest import make_blog
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_blog_summary(self, unit_env):
        """The response carries the comment and the blog's new counters."""
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog())
        author_id = str(uuid4())

        response = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), content="Great read", author_id=author_id
            )
        )

        assert response.comment.content == "Great read"
        assert response.comment.author_id == author_id
        assert response.comment.blog_author_id == str(blog.author_id)
        assert response.blog.slug == str(blog.slug)
        assert response.blog.total_comments == 1
        assert response.blog.total_parent_comments == 1

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_blog(self, unit_env):
        """Commenting on an unknown blog is NotFound and stores nothing."""
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(uuid4()), content="Hello", author_id=str(uuid4())
                )
            )

        assert await comment_repo.count_top_level() == 0


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_nested_reply_updates_every_ancestor(self, unit_env):
        """A reply three levels deep bumps all three ancestors."""
        create_comment = await unit_env.get(CreateCommentUseCase)
        create_reply = await unit_env.get(CreateReplyUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog())
        user = str(uuid4())

        a = await create_comment.execute(
            CreateCommentRequest(blog_id=str(blog.id), content="A", author_id=user)
        )
        b = await create_reply.execute(
            CreateReplyRequest(
                comment_id=a.comment.comment_id, content="B", author_id=user
            )
        )
        c = await create_reply.execute(
            CreateReplyRequest(
                comment_id=b.comment.comment_id, content="C", author_id=user
            )
        )
        d = await create_reply.execute(
            CreateReplyRequest(
                comment_id=c.comment.comment_id, content="D", author_id=user
            )
        )

        assert d.ancestors_updated == [
            c.comment.comment_id,
            b.comment.comment_id,
            a.comment.comment_id,
        ]
        assert d.blog.total_comments == 4
        assert d.blog.total_parent_comments == 1
        stored = {}
        for name, item in (("a", a), ("b", b), ("c", c)):
            comment_id = CommentId(UUID(item.comment.comment_id))
            stored[name] = (await comment_repo.find_by_id(comment_id)).total_replies
        assert stored == {"a": 3, "b": 2, "c": 1}

    @pytest.mark.asyncio
    async def test_reply_to_missing_comment(self, unit_env):
        """Replying to an unknown comment is NotFound and rolls back."""
        use_case = await unit_env.get(CreateReplyUseCase)
        transaction = await unit_env.get(Transaction)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReplyRequest(
                    comment_id=str(uuid4()), content="Hi", author_id=str(uuid4())
                )
            )

        assert transaction.rollbacks == 1

    @pytest.mark.asyncio
    async def test_malformed_id_is_a_value_error(self, unit_env):
        """IDs that aren't UUIDs are rejected before any lookup."""
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(ValueError):
            await use_case.execute(
                CreateReplyRequest(
                    comment_id="not-a-uuid", content="Hi", author_id=str(uuid4())
                )
            )
