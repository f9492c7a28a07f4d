"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .media_service import MediaService, MediaStorage, MediaUpload
from .password_service import PasswordService
from .post_service import PostService
from .user_service import UserService

__all__ = [
    "JWTService",
    "MediaService",
    "MediaStorage",
    "MediaUpload",
    "PasswordService",
    "PostService",
    "Service",
    "UserService",
]
