"""Blog domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire

from blogsphere.domain.error import AlreadyExistsError
from blogsphere.domain.model.blog import Blog, BlogActivity, BlogContent
from blogsphere.domain.repository import BlogRepository
from blogsphere.domain.value import BlogId, Slug, TagName, UserId

from .base import Service

# Random slug suffixes practically never collide; retry a few times anyway.
_SLUG_ATTEMPTS = 5


class BlogService(Service):
    """Domain service for blog operations."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        """Initialize blog service.

        Args:
            blog_repository: Blog repository
        """
        self.blog_repository = blog_repository

    async def create_blog(
        self,
        author_id: UserId,
        title: str,
        is_draft: bool,
        description: str | None = None,
        content: BlogContent | None = None,
        cover_img_url: str | None = None,
        tags: list[TagName] | None = None,
    ) -> Blog:
        """Create a blog (draft or published).

        Args:
            author_id: Author user ID
            title: Blog title
            is_draft: Whether the blog is a draft
            description: Short description (required when published)
            content: Editor content (required when published)
            cover_img_url: Cover image URL
            tags: Tags (at least one when published)

        Returns:
            Saved blog

        Raises:
            ValueError: If a published blog is incomplete
            AlreadyExistsError: If no free slug could be generated
        """
        with logfire.span(
            "blog_service.create_blog", author_id=str(author_id), is_draft=is_draft
        ):
            slug = await self._generate_slug(title)
            now = datetime.now()
            blog = Blog(
                id=BlogId(uuid4()),
                slug=slug,
                title=title,
                description=description,
                content=content,
                cover_img_url=cover_img_url,
                tags=tags or [],
                author_id=author_id,
                is_draft=is_draft,
                activity=BlogActivity(),
                created_at=now,
                updated_at=now,
            )
            saved = await self.blog_repository.save(blog)
            logfire.info("Blog created", blog_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def _generate_slug(self, title: str) -> Slug:
        for _ in range(_SLUG_ATTEMPTS):
            slug = Slug.from_title(title)
            if await self.blog_repository.find_by_slug(slug) is None:
                return slug
            logfire.warn("Slug collision, retrying", slug=str(slug))
        raise AlreadyExistsError("Blog", "slug", str(slug))

    async def get_blog_by_id(self, blog_id: BlogId) -> Blog | None:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            Blog if found, None otherwise
        """
        with logfire.span("blog_service.get_blog_by_id", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)
            if blog is None:
                logfire.warn("Blog not found", blog_id=str(blog_id))
            return blog

    async def get_blog_by_slug(self, slug: Slug) -> Blog | None:
        """Get a blog by slug.

        Args:
            slug: Blog slug

        Returns:
            Blog if found, None otherwise
        """
        with logfire.span("blog_service.get_blog_by_slug", slug=str(slug)):
            blog = await self.blog_repository.find_by_slug(slug)
            if blog:
                logfire.info("Blog found by slug", slug=str(slug), blog_id=str(blog.id))
            else:
                logfire.warn("Blog not found by slug", slug=str(slug))
            return blog

    async def list_blogs(
        self,
        tag: TagName | None = None,
        author_id: UserId | None = None,
        is_draft: bool = False,
        limit: int = 10,
        offset: int = 0,
    ) -> tuple[list[Blog], int]:
        """List blogs, newest first.

        Returns:
            The page of blogs and the total count
        """
        with logfire.span(
            "blog_service.list_blogs",
            tag=str(tag) if tag else None,
            author_id=str(author_id) if author_id else None,
            is_draft=is_draft,
        ):
            total = await self.blog_repository.count(
                tag=tag, author_id=author_id, is_draft=is_draft
            )
            blogs = await self.blog_repository.find_all(
                tag=tag,
                author_id=author_id,
                is_draft=is_draft,
                limit=limit,
                offset=offset,
            )
            return blogs, total

    async def update_blog(self, blog: Blog, changes: dict[str, Any]) -> Blog:
        """Apply field changes to a blog.

        The merged blog is validated again, so publishing an incomplete
        draft fails.

        Args:
            blog: Current blog
            changes: Field values to replace

        Returns:
            Saved blog

        Raises:
            ValueError: If the resulting blog is invalid
        """
        with logfire.span(
            "blog_service.update_blog",
            blog_id=str(blog.id),
            fields=sorted(changes),
        ):
            merged = blog.model_dump()
            merged.update(changes)
            merged["updated_at"] = datetime.now()
            updated = Blog.model_validate(merged)

            saved = await self.blog_repository.save(updated)
            logfire.info("Blog updated", blog_id=str(blog.id))
            return saved

    async def increment_reads(self, blog_id: BlogId) -> Blog | None:
        """Atomically add one read to a blog.

        Args:
            blog_id: Blog ID

        Returns:
            Updated blog, or None if it doesn't exist
        """
        with logfire.span("blog_service.increment_reads", blog_id=str(blog_id)):
            blog = await self.blog_repository.increment_activity(
                blog_id, total_reads=1
            )
            logfire.info("Blog read recorded", blog_id=str(blog_id))
            return blog

    async def toggle_like(self, blog: Blog, user_id: UserId) -> tuple[Blog, bool]:
        """Like a blog, or remove the like if the user already likes it.

        Args:
            blog: Blog being liked
            user_id: User toggling the like

        Returns:
            The updated blog and whether the user now likes it
        """
        with logfire.span(
            "blog_service.toggle_like", blog_id=str(blog.id), user_id=str(user_id)
        ):
            if await self.blog_repository.has_like(blog.id, user_id):
                changed = await self.blog_repository.remove_like(blog.id, user_id)
                liked, delta = False, -1
            else:
                changed = await self.blog_repository.add_like(blog.id, user_id)
                liked, delta = True, 1

            updated = blog
            if changed:
                updated = (
                    await self.blog_repository.increment_activity(
                        blog.id, total_likes=delta
                    )
                    or blog
                )

            logfire.info(
                "Blog like toggled",
                blog_id=str(blog.id),
                liked=liked,
                total_likes=updated.activity.total_likes,
            )
            return updated, liked

    async def has_like(self, blog_id: BlogId, user_id: UserId) -> bool:
        """Check whether a user likes a blog."""
        return await self.blog_repository.has_like(blog_id, user_id)

    async def delete_blog(self, blog_id: BlogId) -> bool:
        """Delete a blog and its likes.

        Args:
            blog_id: Blog ID

        Returns:
            True if the blog was deleted
        """
        with logfire.span("blog_service.delete_blog", blog_id=str(blog_id)):
            deleted = await self.blog_repository.delete(blog_id)
            if deleted:
                logfire.info("Blog deleted", blog_id=str(blog_id))
            else:
                logfire.warn("Blog not found for deletion", blog_id=str(blog_id))
            return deleted
