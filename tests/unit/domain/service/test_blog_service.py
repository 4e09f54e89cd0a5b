"""Unit tests for BlogService."""

from uuid import uuid4

import pytest

from blogsphere.domain.model.blog import BlogContent, ContentBlock
from blogsphere.domain.repository import BlogRepository
from blogsphere.domain.service import BlogService
from blogsphere.domain.value import Slug, TagName, UserId
from tests.conftest import make_blog
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()

CONTENT = BlogContent(blocks=[ContentBlock(type="paragraph", data={"text": "Hi"})])


class TestCreateBlog:
    """Tests for create_blog."""

    @pytest.mark.asyncio
    async def test_create_published_blog(self, unit_env):
        """A complete blog is saved with a slug derived from the title."""
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)

        blog = await blog_service.create_blog(
            author_id=UserId(uuid4()),
            title="Hello World",
            is_draft=False,
            description="Intro",
            content=CONTENT,
            tags=[TagName("Python")],
        )

        assert str(blog.slug).startswith("hello-world-")
        assert blog.tags == [TagName("python")]
        assert blog.activity.total_comments == 0
        assert await blog_repo.find_by_slug(blog.slug) is not None

    @pytest.mark.asyncio
    async def test_create_draft_needs_only_title(self, unit_env):
        """Drafts may be incomplete."""
        blog_service = await unit_env.get(BlogService)

        blog = await blog_service.create_blog(
            author_id=UserId(uuid4()), title="Half done", is_draft=True
        )

        assert blog.is_draft is True
        assert blog.content is None

    @pytest.mark.asyncio
    async def test_published_blog_without_tags_is_rejected(self, unit_env):
        """Publishing requires at least one tag."""
        blog_service = await unit_env.get(BlogService)

        with pytest.raises(ValueError, match="tag"):
            await blog_service.create_blog(
                author_id=UserId(uuid4()),
                title="No tags",
                is_draft=False,
                description="Intro",
                content=CONTENT,
            )


class TestUpdateBlog:
    """Tests for update_blog."""

    @pytest.mark.asyncio
    async def test_update_keeps_activity_counters(self, unit_env):
        """Field edits never overwrite stored counters."""
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog())
        await blog_repo.increment_activity(blog.id, total_comments=5)

        updated = await blog_service.update_blog(blog, {"title": "Renamed"})

        assert updated.title == "Renamed"
        assert updated.slug == blog.slug
        assert updated.activity.total_comments == 5

    @pytest.mark.asyncio
    async def test_publishing_incomplete_draft_fails(self, unit_env):
        """A draft without content cannot be published."""
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        draft = await blog_repo.save(
            make_blog(is_draft=True, content=None, description=None)
        )

        with pytest.raises(ValueError):
            await blog_service.update_blog(draft, {"is_draft": False})


class TestLikesAndReads:
    """Tests for toggle_like and increment_reads."""

    @pytest.mark.asyncio
    async def test_toggle_like_twice_returns_to_zero(self, unit_env):
        """Liking then unliking leaves total_likes unchanged."""
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog())
        user_id = UserId(uuid4())

        liked_blog, liked = await blog_service.toggle_like(blog, user_id)
        unliked_blog, unliked = await blog_service.toggle_like(liked_blog, user_id)

        assert liked is True
        assert liked_blog.activity.total_likes == 1
        assert unliked is False
        assert unliked_blog.activity.total_likes == 0
        assert await blog_service.has_like(blog.id, user_id) is False

    @pytest.mark.asyncio
    async def test_increment_reads(self, unit_env):
        """Each read adds one."""
        blog_service = await unit_env.get(BlogService)
        blog_repo = await unit_env.get(BlogRepository)
        blog = await blog_repo.save(make_blog())

        await blog_service.increment_reads(blog.id)
        updated = await blog_service.increment_reads(blog.id)

        assert updated.activity.total_reads == 2

    @pytest.mark.asyncio
    async def test_get_unknown_slug_returns_none(self, unit_env):
        """Unknown slugs are not an error at service level."""
        blog_service = await unit_env.get(BlogService)

        assert await blog_service.get_blog_by_slug(Slug("missing-1234")) is None
