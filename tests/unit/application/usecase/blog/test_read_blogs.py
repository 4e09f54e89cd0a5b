"""Unit tests for the blog read use cases."""

from uuid import uuid4

import pytest

from blogsphere.application.usecase.blog import (
    GetBlogRequest,
    GetBlogUseCase,
    IncrementReadCountRequest,
    IncrementReadCountUseCase,
    ListBlogsRequest,
    ListBlogsUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from blogsphere.domain.error import NotAuthorizedError, NotFoundError
from blogsphere.domain.repository import BlogRepository, UserRepository
from blogsphere.domain.value import TagName
from tests.conftest import make_blog, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetBlogUseCase:
    """Tests for GetBlogUseCase."""

    @pytest.mark.asyncio
    async def test_draft_hidden_from_others(self, unit_env):
        """Drafts are only visible to their author."""
        use_case = await unit_env.get(GetBlogUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        draft = await blog_repo.save(make_blog(is_draft=True))

        own = await use_case.execute(
            GetBlogRequest(slug=str(draft.slug), user_id=str(draft.author_id))
        )
        assert own.is_draft is True

        with pytest.raises(NotFoundError):
            await use_case.execute(GetBlogRequest(slug=str(draft.slug)))

    @pytest.mark.asyncio
    async def test_liked_flag(self, unit_env):
        """The viewer's like shows up in the response."""
        get_blog = await unit_env.get(GetBlogUseCase)
        toggle_like = await unit_env.get(ToggleLikeUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog())
        viewer = str(uuid4())

        liked = await toggle_like.execute(
            ToggleLikeRequest(slug=str(blog.slug), user_id=viewer)
        )
        response = await get_blog.execute(
            GetBlogRequest(slug=str(blog.slug), user_id=viewer)
        )

        assert liked.liked is True
        assert liked.total_likes == 1
        assert response.liked is True
        assert response.activity.total_likes == 1


class TestListBlogsUseCase:
    """Tests for ListBlogsUseCase."""

    @pytest.mark.asyncio
    async def test_filter_by_tag(self, unit_env):
        """Only blogs carrying the tag are listed."""
        use_case = await unit_env.get(ListBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        tagged = await blog_repo.save(make_blog(tags=[TagName("python")]))
        await blog_repo.save(make_blog(tags=[TagName("rust")]))
        await blog_repo.save(make_blog(is_draft=True, tags=[TagName("python")]))

        response = await use_case.execute(ListBlogsRequest(tag="Python"))

        assert response.count == 1
        assert response.results[0].blog_id == str(tagged.id)

    @pytest.mark.asyncio
    async def test_drafts_need_authentication(self, unit_env):
        """Anonymous users cannot list drafts."""
        use_case = await unit_env.get(ListBlogsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(ListBlogsRequest(is_draft=True))

    @pytest.mark.asyncio
    async def test_drafts_of_current_user(self, unit_env):
        """Listing drafts returns the caller's drafts only."""
        use_case = await unit_env.get(ListBlogsUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        mine = await blog_repo.save(make_blog(is_draft=True))
        await blog_repo.save(make_blog(is_draft=True))

        response = await use_case.execute(
            ListBlogsRequest(is_draft=True, user_id=str(mine.author_id))
        )

        assert [item.blog_id for item in response.results] == [str(mine.id)]


class TestIncrementReadCountUseCase:
    """Tests for IncrementReadCountUseCase."""

    @pytest.mark.asyncio
    async def test_read_counts_on_blog_and_author(self, unit_env):
        """A read is counted on the blog and on its author."""
        use_case = await unit_env.get(IncrementReadCountUseCase)
        user_repo = await unit_env.get(UserRepository)
        blog_repo = await unit_env.get(BlogRepository)
        author = await user_repo.save(make_user())
        blog = await blog_repo.save(make_blog(author_id=author.id))

        response = await use_case.execute(
            IncrementReadCountRequest(slug=str(blog.slug))
        )

        assert response.total_reads == 1
        assert (await user_repo.find_by_id(author.id)).total_reads == 1
