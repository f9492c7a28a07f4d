"""Account and authentication routes."""

from typing import Annotated, Any

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Body, File, Header, HTTPException, UploadFile, status
from pydantic import BaseModel

from inkwell.application.usecase.account import (
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetProfileRequest,
    GetProfileUseCase,
    GetStatsUseCase,
    IncrementPostStatUseCase,
    SelectAvatarRequest,
    SelectAvatarResponse,
    SelectAvatarUseCase,
    StatsRequest,
    StatsResponse,
    UpdatePreferencesRequest,
    UpdatePreferencesUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UploadAvatarRequest,
    UploadAvatarResponse,
    UploadAvatarUseCase,
    UserProfile,
)
from inkwell.application.usecase.auth import (
    AuthTokenResponse,
    LoginRequest,
    LoginUseCase,
    SignupRequest,
    SignupUseCase,
    VerifyTokenRequest,
    VerifyTokenResponse,
    VerifyTokenUseCase,
)
from inkwell.application.usecase.base import MessageResponse
from inkwell.domain.error import DomainError
from inkwell.domain.service import MediaUpload
from inkwell.interface.api.dependencies import CurrentUser
from inkwell.interface.error import to_http_exception

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

SERVER_ERROR = "Server error"


class SignupAPIRequest(BaseModel):
    """Signup body. Every field is optional so missing ones yield 400, not 422."""

    email: str | None = None
    username: str | None = None
    password: str | None = None


class LoginAPIRequest(BaseModel):
    """Login body."""

    email: str | None = None
    password: str | None = None


class UpdateProfileAPIRequest(BaseModel):
    """Profile patch body."""

    username: str | None = None
    email: str | None = None


class SelectAvatarAPIRequest(BaseModel):
    """Avatar selection body."""

    avatar: str | None = None


def _server_error(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail
    )


@router.post(
    "/signup", response_model=AuthTokenResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignupAPIRequest,
    signup_use_case: FromDishka[SignupUseCase],
) -> AuthTokenResponse:
    """Register an account and return a session token.

    Example:
        POST /auth/signup
        {"email": "ada@example.com", "username": "ada", "password": "LongEnough1234!"}

        201 {"token": "eyJ...", "userId": "5f0c..."}
    """
    try:
        return await signup_use_case.execute(
            SignupRequest(
                email=request.email,
                username=request.username,
                password=request.password,
            )
        )
    except DomainError as e:
        logfire.warn("Signup rejected", error=str(e))
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Unexpected error during signup")
        raise _server_error(SERVER_ERROR)


@router.post("/login", response_model=AuthTokenResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthTokenResponse:
    """Exchange email and password for a session token."""
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Unexpected error during login")
        raise _server_error(SERVER_ERROR)


@router.get("/verify", response_model=VerifyTokenResponse)
async def verify(
    verify_token_use_case: FromDishka[VerifyTokenUseCase],
    authorization: Annotated[str | None, Header()] = None,
) -> VerifyTokenResponse:
    """Check a bearer token and echo its claims.

    Only the signature and expiry are checked; the account is not looked up.
    """
    try:
        return await verify_token_use_case.execute(
            VerifyTokenRequest(authorization=authorization)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/me", response_model=UserProfile)
async def me(
    auth: CurrentUser,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> UserProfile:
    """Current user's profile with a live post count."""
    try:
        return await get_profile_use_case.execute(GetProfileRequest(user_id=auth.user_id))
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Profile fetch failed", user_id=str(auth.user_id))
        raise _server_error(SERVER_ERROR)


@router.put("/update", response_model=UserProfile)
async def update_profile(
    request: UpdateProfileAPIRequest,
    auth: CurrentUser,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
) -> UserProfile:
    """Change username and/or email."""
    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=auth.user_id, username=request.username, email=request.email
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Profile update failed", user_id=str(auth.user_id))
        raise _server_error("Failed to update profile")


@router.put("/preferences", response_model=UserProfile)
async def update_preferences(
    auth: CurrentUser,
    update_preferences_use_case: FromDishka[UpdatePreferencesUseCase],
    preferences: dict[str, Any] = Body(...),
) -> UserProfile:
    """Replace the preferences record with the request body.

    Options missing from the body are reset to their defaults.
    """
    try:
        return await update_preferences_use_case.execute(
            UpdatePreferencesRequest(user_id=auth.user_id, preferences=preferences)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Preferences update failed", user_id=str(auth.user_id))
        raise _server_error("Failed to update preferences")


@router.post("/avatar", response_model=UploadAvatarResponse)
async def upload_avatar(
    auth: CurrentUser,
    upload_avatar_use_case: FromDishka[UploadAvatarUseCase],
    avatar: UploadFile | None = File(default=None),
) -> UploadAvatarResponse:
    """Upload an image (multipart field ``avatar``) and make it the active avatar."""
    upload = None
    if avatar is not None:
        upload = MediaUpload(
            filename=avatar.filename or "",
            content_type=avatar.content_type,
            source=avatar,
        )

    try:
        return await upload_avatar_use_case.execute(
            UploadAvatarRequest(user_id=auth.user_id, upload=upload)
        )
    except DomainError as e:
        logfire.warn("Avatar upload rejected", user_id=str(auth.user_id), error=str(e))
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Avatar upload failed", user_id=str(auth.user_id))
        raise _server_error("Failed to upload avatar")


@router.put("/avatar/select", response_model=SelectAvatarResponse)
async def select_avatar(
    request: SelectAvatarAPIRequest,
    auth: CurrentUser,
    select_avatar_use_case: FromDishka[SelectAvatarUseCase],
) -> SelectAvatarResponse:
    """Switch to one of the caller's previously uploaded avatars."""
    try:
        return await select_avatar_use_case.execute(
            SelectAvatarRequest(user_id=auth.user_id, avatar=request.avatar)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Avatar selection failed", user_id=str(auth.user_id))
        raise _server_error("Failed to select avatar")


@router.delete("/delete", response_model=MessageResponse)
async def delete_account(
    auth: CurrentUser,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
) -> MessageResponse:
    """Delete the caller's account (posts and uploads are kept)."""
    try:
        return await delete_account_use_case.execute(
            DeleteAccountRequest(user_id=auth.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Account deletion failed", user_id=str(auth.user_id))
        raise _server_error("Failed to delete account")


@router.post("/stats/post", response_model=StatsResponse)
async def increment_post_stat(
    auth: CurrentUser,
    increment_post_stat_use_case: FromDishka[IncrementPostStatUseCase],
) -> StatsResponse:
    """Add one to the stored post counter."""
    try:
        return await increment_post_stat_use_case.execute(
            StatsRequest(user_id=auth.user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Post counter update failed", user_id=str(auth.user_id))
        raise _server_error("Failed to update posts")


@router.get("/stats", response_model=StatsResponse)
async def get_stats(
    auth: CurrentUser,
    get_stats_use_case: FromDishka[GetStatsUseCase],
) -> StatsResponse:
    """Stored counters."""
    try:
        return await get_stats_use_case.execute(StatsRequest(user_id=auth.user_id))
    except DomainError as e:
        raise to_http_exception(e)
    except Exception:
        logfire.exception("Stats fetch failed", user_id=str(auth.user_id))
        raise _server_error("Failed to fetch stats")
