"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, UploadSettings
from inkwell.domain.repository import PostRepository, UserRepository
from inkwell.domain.service import (
    JWTService,
    MediaService,
    MediaStorage,
    PasswordService,
    PostService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services provider.

    Services that wrap repositories are REQUEST-scoped to share the request's
    session. Stateless crypto services live for the whole app.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service (caches its decoy digest)."""
        return PasswordService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(self, post_repository: PostRepository) -> PostService:
        """Provide post domain service."""
        return PostService(post_repository=post_repository)

    @provide
    def get_media_service(
        self, storage: MediaStorage, upload_settings: UploadSettings
    ) -> MediaService:
        """Provide media ingestion service."""
        return MediaService(storage=storage, upload_settings=upload_settings)
