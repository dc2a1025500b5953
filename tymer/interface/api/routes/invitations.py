"""Invitation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from tymer.application.usecase.invitation import (
    AcceptInvitationRequest,
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    GetOrCreateInvitationRequest,
    GetOrCreateInvitationResponse,
    GetOrCreateInvitationUseCase,
    ValidateInvitationRequest,
    ValidateInvitationResponse,
    ValidateInvitationUseCase,
)
from tymer.domain.service import JWTService
from tymer.interface.api.session import session_user_id

router = APIRouter(prefix="/invitations", tags=["invitations"], route_class=DishkaRoute)


@router.get("", response_model=GetOrCreateInvitationResponse)
async def get_my_invitation(
    use_case: FromDishka[GetOrCreateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetOrCreateInvitationResponse:
    """Get the code to share with friends, creating one if needed.

    Example:
        GET /invitations

        Response:
        {
            "invitation_id": "4b0c...",
            "code": "AB3XQ9KZ",
            "expires_at": "2026-10-26T09:00:00+02:00",
            "created_at": "2026-10-19T09:00:00+02:00"
        }
    """
    return await use_case.execute(
        GetOrCreateInvitationRequest(user_id=session_user_id(jwt_service, auth_token))
    )


@router.get("/{code}", response_model=ValidateInvitationResponse)
async def validate_invitation(
    code: str,
    use_case: FromDishka[ValidateInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ValidateInvitationResponse:
    """Check a code before redeeming it."""
    return await use_case.execute(
        ValidateInvitationRequest(
            code=code, user_id=session_user_id(jwt_service, auth_token)
        )
    )


@router.post("/{code}/accept", response_model=AcceptInvitationResponse)
async def accept_invitation(
    code: str,
    use_case: FromDishka[AcceptInvitationUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> AcceptInvitationResponse:
    """Redeem a code and become friends with its creator."""
    return await use_case.execute(
        AcceptInvitationRequest(
            code=code, user_id=session_user_id(jwt_service, auth_token)
        )
    )
