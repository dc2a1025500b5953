"""Moment routes."""

import json

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, Form, UploadFile, status
from pydantic import BaseModel, Field

from tymer.application.usecase.moment import (
    AddReactionResponse,
    AddTextReactionRequest,
    AddTextReactionUseCase,
    AddVoiceReactionRequest,
    AddVoiceReactionUseCase,
    CreateMomentRequest,
    CreateMomentResponse,
    CreateMomentUseCase,
    DeleteMomentRequest,
    DeleteMomentResponse,
    DeleteMomentUseCase,
    GetFeedRequest,
    GetFeedResponse,
    GetFeedUseCase,
    GetMyMomentsRequest,
    GetMyMomentsResponse,
    GetMyMomentsUseCase,
)
from tymer.domain.error import ValidationError
from tymer.domain.service import JWTService
from tymer.interface.api.session import session_user_id

router = APIRouter(prefix="/moments", tags=["moments"], route_class=DishkaRoute)


class AddTextReactionAPIRequest(BaseModel):
    """API request for a text reaction."""

    content: str = Field(min_length=1, max_length=500)


def _parse_waveform(raw: str | None) -> list[float] | None:
    if not raw:
        return None
    try:
        samples = json.loads(raw)
        return [float(s) for s in samples]
    except (ValueError, TypeError):
        raise ValidationError("Waveform must be a JSON list of numbers")


@router.post("", response_model=CreateMomentResponse, status_code=status.HTTP_201_CREATED)
async def create_moment(
    use_case: FromDishka[CreateMomentUseCase],
    jwt_service: FromDishka[JWTService],
    image: UploadFile | None = File(default=None),
    description: str | None = Form(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CreateMomentResponse:
    """Post today's moment (multipart: `image` JPEG and/or `description`)."""
    return await use_case.execute(
        CreateMomentRequest(
            user_id=session_user_id(jwt_service, auth_token),
            image=await image.read() if image else None,
            description=description,
        )
    )


@router.get("/feed", response_model=GetFeedResponse)
async def get_feed(
    use_case: FromDishka[GetFeedUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetFeedResponse:
    """Today's moments from friends, newest first."""
    return await use_case.execute(
        GetFeedRequest(user_id=session_user_id(jwt_service, auth_token))
    )


@router.get("/mine", response_model=GetMyMomentsResponse)
async def get_my_moments(
    use_case: FromDishka[GetMyMomentsUseCase],
    jwt_service: FromDishka[JWTService],
    limit: int | None = None,
    auth_token: str | None = Cookie(default=None),
) -> GetMyMomentsResponse:
    """The user's own recent moments."""
    return await use_case.execute(
        GetMyMomentsRequest(
            user_id=session_user_id(jwt_service, auth_token), limit=limit
        )
    )


@router.delete("/{moment_id}", response_model=DeleteMomentResponse)
async def delete_moment(
    moment_id: str,
    use_case: FromDishka[DeleteMomentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteMomentResponse:
    """Delete one of the user's moments."""
    return await use_case.execute(
        DeleteMomentRequest(
            moment_id=moment_id, user_id=session_user_id(jwt_service, auth_token)
        )
    )


@router.post(
    "/{moment_id}/reactions/text",
    response_model=AddReactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_text_reaction(
    moment_id: str,
    request: AddTextReactionAPIRequest,
    use_case: FromDishka[AddTextReactionUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AddReactionResponse:
    """React to a moment with text."""
    return await use_case.execute(
        AddTextReactionRequest(
            moment_id=moment_id,
            user_id=session_user_id(jwt_service, auth_token),
            content=request.content,
        )
    )


@router.post(
    "/{moment_id}/reactions/voice",
    response_model=AddReactionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_voice_reaction(
    moment_id: str,
    use_case: FromDishka[AddVoiceReactionUseCase],
    jwt_service: FromDishka[JWTService],
    audio: UploadFile = File(...),
    duration: float = Form(...),
    waveform: str | None = Form(default=None),
    auth_token: str | None = Cookie(default=None),
) -> AddReactionResponse:
    """React with a short recording (multipart: `audio` m4a, `duration`, `waveform`)."""
    return await use_case.execute(
        AddVoiceReactionRequest(
            moment_id=moment_id,
            user_id=session_user_id(jwt_service, auth_token),
            audio=await audio.read(),
            duration=duration,
            waveform=_parse_waveform(waveform),
        )
    )
