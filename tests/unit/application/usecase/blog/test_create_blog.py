"""Unit tests for CreateBlogUseCase."""

from uuid import uuid4

import pytest

from blogsphere.application.usecase.blog import CreateBlogRequest, CreateBlogUseCase
from blogsphere.domain.error import NotFoundError
from blogsphere.domain.repository import UserRepository
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

CONTENT = {"blocks": [{"type": "paragraph", "data": {"text": "Hello"}}]}


class TestCreateBlogUseCase:
    """Tests for CreateBlogUseCase."""

    @pytest.mark.asyncio
    async def test_published_blog_counts_on_author(self, unit_env):
        """Publishing adds one to the author's total_posts."""
        use_case = await unit_env.get(CreateBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        response = await use_case.execute(
            CreateBlogRequest(
                author_id=str(author.id),
                title="State management",
                description="Comparing stores",
                content=CONTENT,
                tags=["React", "zustand"],
            )
        )

        assert response.tags == ["react", "zustand"]
        assert response.activity.total_comments == 0
        assert (await user_repo.find_by_id(author.id)).total_posts == 1

    @pytest.mark.asyncio
    async def test_draft_does_not_count(self, unit_env):
        """Drafts leave total_posts alone."""
        use_case = await unit_env.get(CreateBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        response = await use_case.execute(
            CreateBlogRequest(author_id=str(author.id), title="WIP", is_draft=True)
        )

        assert response.is_draft is True
        assert (await user_repo.find_by_id(author.id)).total_posts == 0

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env):
        """Blogs need an existing author."""
        use_case = await unit_env.get(CreateBlogUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateBlogRequest(author_id=str(uuid4()), title="x", is_draft=True)
            )

    @pytest.mark.asyncio
    async def test_incomplete_published_blog(self, unit_env):
        """A published blog without description is rejected."""
        use_case = await unit_env.get(CreateBlogUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(ValueError, match="Description"):
            await use_case.execute(
                CreateBlogRequest(
                    author_id=str(author.id),
                    title="Bare",
                    content=CONTENT,
                    tags=["misc"],
                )
            )

        assert (await user_repo.find_by_id(author.id)).total_posts == 0
