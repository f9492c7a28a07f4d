"""Application layer DI providers."""

from dishka import Scope, provide

from inkwell.application.usecase.account import (
    DeleteAccountUseCase,
    GetProfileUseCase,
    GetStatsUseCase,
    IncrementPostStatUseCase,
    SelectAvatarUseCase,
    UpdatePreferencesUseCase,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)
from inkwell.application.usecase.auth import (
    AuthenticateUseCase,
    LoginUseCase,
    SignupUseCase,
    VerifyTokenUseCase,
)
from inkwell.application.usecase.post import (
    CreatePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
)
from inkwell.domain.service import (
    JWTService,
    MediaService,
    PasswordService,
    PostService,
    UserService,
)
from inkwell.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> SignupUseCase:
        """Provide signup use case."""
        return SignupUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
        )

    @provide
    def get_verify_token_use_case(self, jwt_service: JWTService) -> VerifyTokenUseCase:
        """Provide verify token use case."""
        return VerifyTokenUseCase(jwt_service=jwt_service)

    @provide
    def get_authenticate_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> AuthenticateUseCase:
        """Provide the auth gate."""
        return AuthenticateUseCase(jwt_service=jwt_service, user_service=user_service)

    # Account use cases
    @provide
    def get_profile_use_case(
        self, user_service: UserService, post_service: PostService
    ) -> GetProfileUseCase:
        """Provide get profile use case."""
        return GetProfileUseCase(user_service=user_service, post_service=post_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide
    def get_update_preferences_use_case(
        self, user_service: UserService
    ) -> UpdatePreferencesUseCase:
        """Provide update preferences use case."""
        return UpdatePreferencesUseCase(user_service=user_service)

    @provide
    def get_upload_avatar_use_case(
        self, media_service: MediaService, user_service: UserService
    ) -> UploadAvatarUseCase:
        """Provide upload avatar use case."""
        return UploadAvatarUseCase(
            media_service=media_service, user_service=user_service
        )

    @provide
    def get_select_avatar_use_case(
        self, user_service: UserService
    ) -> SelectAvatarUseCase:
        """Provide select avatar use case."""
        return SelectAvatarUseCase(user_service=user_service)

    @provide
    def get_delete_account_use_case(
        self, user_service: UserService
    ) -> DeleteAccountUseCase:
        """Provide delete account use case."""
        return DeleteAccountUseCase(user_service=user_service)

    @provide
    def get_increment_post_stat_use_case(
        self, user_service: UserService
    ) -> IncrementPostStatUseCase:
        """Provide increment post stat use case."""
        return IncrementPostStatUseCase(user_service=user_service)

    @provide
    def get_stats_use_case(self, user_service: UserService) -> GetStatsUseCase:
        """Provide get stats use case."""
        return GetStatsUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        media_service: MediaService,
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            media_service=media_service,
        )

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(post_service=post_service, user_service=user_service)

    @provide
    def get_list_posts_use_case(
        self, post_service: PostService, user_service: UserService
    ) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service, user_service=user_service)
