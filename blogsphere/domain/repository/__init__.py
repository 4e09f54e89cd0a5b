"""Repository interfaces for the Blogsphere domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from blogsphere.domain.repository.blog import BlogRepository
from blogsphere.domain.repository.comment import CommentRepository
from blogsphere.domain.repository.transaction import Transaction
from blogsphere.domain.repository.user import UserRepository

__all__ = [
    "BlogRepository",
    "CommentRepository",
    "Transaction",
    "UserRepository",
]
