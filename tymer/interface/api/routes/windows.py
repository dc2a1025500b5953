"""Posting window and reminder routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie

from tymer.application.usecase.window import (
    CancelRemindersRequest,
    CancelRemindersResponse,
    CancelRemindersUseCase,
    GetWindowStatusRequest,
    GetWindowStatusResponse,
    GetWindowStatusUseCase,
    HandleNotificationResponseRequest,
    HandleNotificationResponseResponse,
    HandleNotificationResponseUseCase,
    ScheduleRemindersRequest,
    ScheduleRemindersResponse,
    ScheduleRemindersUseCase,
)
from tymer.domain.service import JWTService
from tymer.interface.api.session import session_user_id

router = APIRouter(prefix="/windows", tags=["windows"], route_class=DishkaRoute)


@router.get("", response_model=GetWindowStatusResponse)
async def get_window_status(
    use_case: FromDishka[GetWindowStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetWindowStatusResponse:
    """Which windows are open now, what opens next, and whether the user may post."""
    return await use_case.execute(
        GetWindowStatusRequest(user_id=session_user_id(jwt_service, auth_token))
    )


@router.post("/reminders", response_model=ScheduleRemindersResponse)
async def schedule_reminders(
    request: ScheduleRemindersRequest,
    use_case: FromDishka[ScheduleRemindersUseCase],
) -> ScheduleRemindersResponse:
    """Install one daily reminder per window."""
    return await use_case.execute(request)


@router.delete("/reminders", response_model=CancelRemindersResponse)
async def cancel_reminders(
    use_case: FromDishka[CancelRemindersUseCase],
) -> CancelRemindersResponse:
    """Remove every window reminder."""
    return await use_case.execute(CancelRemindersRequest())


@router.post("/reminders/response", response_model=HandleNotificationResponseResponse)
async def handle_notification_response(
    request: HandleNotificationResponseRequest,
    use_case: FromDishka[HandleNotificationResponseUseCase],
) -> HandleNotificationResponseResponse:
    """Report what the user did with a reminder."""
    return await use_case.execute(request)
