"""Account use cases."""

from .delete_account import DeleteAccountRequest, DeleteAccountUseCase
from .get_profile import GetProfileRequest, GetProfileUseCase, UserProfile
from .select_avatar import SelectAvatarRequest, SelectAvatarResponse, SelectAvatarUseCase
from .stats import GetStatsUseCase, IncrementPostStatUseCase, StatsRequest, StatsResponse
from .update_preferences import UpdatePreferencesRequest, UpdatePreferencesUseCase
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .upload_avatar import UploadAvatarRequest, UploadAvatarResponse, UploadAvatarUseCase

__all__ = [
    "DeleteAccountRequest",
    "DeleteAccountUseCase",
    "GetProfileRequest",
    "GetProfileUseCase",
    "GetStatsUseCase",
    "IncrementPostStatUseCase",
    "SelectAvatarRequest",
    "SelectAvatarResponse",
    "SelectAvatarUseCase",
    "StatsRequest",
    "StatsResponse",
    "UpdatePreferencesRequest",
    "UpdatePreferencesUseCase",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UploadAvatarRequest",
    "UploadAvatarResponse",
    "UploadAvatarUseCase",
    "UserProfile",
]
