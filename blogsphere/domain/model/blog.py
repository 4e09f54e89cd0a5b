"""Blog aggregate root."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, model_validator

from blogsphere.domain.model.common import DomainModel
from blogsphere.domain.value import BlogId, Slug, TagName, UserId


class ContentBlock(DomainModel):
    """One block produced by the rich text editor (header, paragraph, list...)."""

    id: Optional[str] = None
    type: str = Field(min_length=1)
    data: dict[str, Any]


class BlogContent(DomainModel):
    """Editor document: an ordered list of blocks."""

    blocks: list[ContentBlock] = Field(default_factory=list)


class BlogActivity(DomainModel):
    """Aggregate counters of a blog.

    total_comments counts every comment and reply of the blog,
    total_parent_comments only the top-level ones.
    """

    total_likes: int = 0
    total_reads: int = 0
    total_comments: int = 0
    total_parent_comments: int = 0


class BlogSummary(DomainModel):
    """Minimal blog reference returned alongside comment operations."""

    id: BlogId
    slug: Slug
    author_id: UserId


class Blog(DomainModel):
    """Blog aggregate root.

    Drafts only need a title. Published blogs also need a description,
    content and at least one tag.
    """

    id: BlogId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    description: Optional[str] = Field(default=None, max_length=200)
    content: Optional[BlogContent] = None
    cover_img_url: Optional[str] = None
    tags: list[TagName] = Field(default_factory=list, max_length=10)
    author_id: UserId
    is_draft: bool = False
    activity: BlogActivity = Field(default_factory=BlogActivity)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_published_content(self) -> "Blog":
        """Validate that published blogs are complete."""
        if self.is_draft:
            return self
        if not self.description:
            raise ValueError("Description is required for published blogs")
        if self.content is None or not self.content.blocks:
            raise ValueError("Content is required for published blogs")
        if not self.tags:
            raise ValueError("At least one tag is required for published blogs")
        return self

    def summary(self) -> BlogSummary:
        """Return the short reference used in comment responses."""
        return BlogSummary(id=self.id, slug=self.slug, author_id=self.author_id)
