"""Response items shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from blogsphere.domain.model.blog import Blog
from blogsphere.domain.model.comment import Comment


class CommentItem(BaseModel):
    """Comment as returned by the API."""

    comment_id: str
    blog_id: str
    blog_author_id: str
    author_id: str
    content: str
    is_reply: bool
    parent_id: str | None
    total_replies: int
    is_edited: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            blog_id=str(comment.blog_id),
            blog_author_id=str(comment.blog_author_id),
            author_id=str(comment.author_id),
            content=comment.content,
            is_reply=comment.is_reply,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            total_replies=comment.total_replies,
            is_edited=comment.is_edited,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class BlogSummaryItem(BaseModel):
    """Blog reference and comment counters after a comment operation."""

    blog_id: str
    slug: str
    author_id: str
    total_comments: int
    total_parent_comments: int

    @classmethod
    def from_blog(cls, blog: Blog | None) -> "BlogSummaryItem | None":
        if blog is None:
            return None
        summary = blog.summary()
        return cls(
            blog_id=str(summary.id),
            slug=str(summary.slug),
            author_id=str(summary.author_id),
            total_comments=blog.activity.total_comments,
            total_parent_comments=blog.activity.total_parent_comments,
        )
