"""PostgreSQL repository implementations."""

from blogsphere.persistence.repository.blog import PostgresBlogRepository
from blogsphere.persistence.repository.comment import PostgresCommentRepository
from blogsphere.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresUserRepository",
]
