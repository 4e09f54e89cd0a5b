"""Blog use cases."""

from .common import BlogActivityItem, BlogItem
from .create_blog import CreateBlogRequest, CreateBlogUseCase
from .delete_blog import DeleteBlogRequest, DeleteBlogResponse, DeleteBlogUseCase
from .get_blog import GetBlogRequest, GetBlogResponse, GetBlogUseCase
from .increment_read_count import (
    IncrementReadCountRequest,
    IncrementReadCountResponse,
    IncrementReadCountUseCase,
)
from .list_blogs import ListBlogsRequest, ListBlogsResponse, ListBlogsUseCase
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase
from .update_blog import UpdateBlogRequest, UpdateBlogUseCase

__all__ = [
    "BlogActivityItem",
    "BlogItem",
    "CreateBlogRequest",
    "CreateBlogUseCase",
    "DeleteBlogRequest",
    "DeleteBlogResponse",
    "DeleteBlogUseCase",
    "GetBlogRequest",
    "GetBlogResponse",
    "GetBlogUseCase",
    "IncrementReadCountRequest",
    "IncrementReadCountResponse",
    "IncrementReadCountUseCase",
    "ListBlogsRequest",
    "ListBlogsResponse",
    "ListBlogsUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
    "UpdateBlogRequest",
    "UpdateBlogUseCase",
]
