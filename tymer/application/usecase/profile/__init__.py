"""Profile use cases."""

from .get_profile import GetProfileRequest, GetProfileUseCase, ProfileResponse
from .update_profile import UpdateProfileRequest, UpdateProfileUseCase
from .upload_avatar import UploadAvatarRequest, UploadAvatarUseCase

__all__ = [
    "GetProfileRequest",
    "GetProfileUseCase",
    "ProfileResponse",
    "UpdateProfileRequest",
    "UpdateProfileUseCase",
    "UploadAvatarRequest",
    "UploadAvatarUseCase",
]
