"""Profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, UploadFile
from pydantic import BaseModel, Field

from tymer.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
    UploadAvatarRequest,
    UploadAvatarUseCase,
)
from tymer.domain.service import JWTService
from tymer.interface.api.session import session_user_id

router = APIRouter(prefix="/profile", tags=["profile"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the profile."""

    display_name: str | None = Field(default=None, max_length=100)
    avatar_color: str | None = None


@router.get("", response_model=ProfileResponse)
async def get_profile(
    use_case: FromDishka[GetProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """The signed-in user's profile."""
    return await use_case.execute(
        GetProfileRequest(user_id=session_user_id(jwt_service, auth_token))
    )


@router.patch("", response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileAPIRequest,
    use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Change display name and/or avatar color.

    Example:
        PATCH /profile
        {"display_name": "Léa", "avatar_color": "mint"}
    """
    return await use_case.execute(
        UpdateProfileRequest(
            user_id=session_user_id(jwt_service, auth_token),
            display_name=request.display_name,
            avatar_color=request.avatar_color,
        )
    )


@router.put("/avatar", response_model=ProfileResponse)
async def upload_avatar(
    use_case: FromDishka[UploadAvatarUseCase],
    jwt_service: FromDishka[JWTService],
    image: UploadFile = File(...),
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Replace the avatar picture (multipart `image`, JPEG)."""
    return await use_case.execute(
        UploadAvatarRequest(
            user_id=session_user_id(jwt_service, auth_token),
            image=await image.read(),
        )
    )
