"""Post use cases."""

from .create_post import CreatePostRequest, CreatePostUseCase
from .get_post import AuthorView, GetPostRequest, GetPostUseCase, PostView
from .list_posts import ListPostsRequest, ListPostsUseCase

__all__ = [
    "AuthorView",
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsRequest",
    "ListPostsUseCase",
    "PostView",
]
