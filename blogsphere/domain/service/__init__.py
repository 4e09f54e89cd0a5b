"""Domain services."""

from .base import Service
from .blog_service import BlogService
from .comment_service import CommentMutation, CommentService
from .counter_propagator import CounterPropagator, PropagationResult
from .jwt_service import JWTService
from .user_service import UserService

__all__ = [
    "BlogService",
    "CommentMutation",
    "CommentService",
    "CounterPropagator",
    "JWTService",
    "PropagationResult",
    "Service",
    "UserService",
]
