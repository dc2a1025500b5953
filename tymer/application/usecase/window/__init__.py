"""Window use cases."""

from .cancel_reminders import (
    CancelRemindersRequest,
    CancelRemindersResponse,
    CancelRemindersUseCase,
)
from .get_window_status import (
    GetWindowStatusRequest,
    GetWindowStatusResponse,
    GetWindowStatusUseCase,
    WindowItem,
)
from .handle_notification_response import (
    HandleNotificationResponseRequest,
    HandleNotificationResponseResponse,
    HandleNotificationResponseUseCase,
)
from .route_capture_request import (
    RouteCaptureRequestRequest,
    RouteCaptureRequestResponse,
    RouteCaptureRequestUseCase,
)
from .schedule_reminders import (
    ScheduleRemindersRequest,
    ScheduleRemindersResponse,
    ScheduleRemindersUseCase,
)

__all__ = [
    "CancelRemindersRequest",
    "CancelRemindersResponse",
    "CancelRemindersUseCase",
    "GetWindowStatusRequest",
    "GetWindowStatusResponse",
    "GetWindowStatusUseCase",
    "HandleNotificationResponseRequest",
    "HandleNotificationResponseResponse",
    "HandleNotificationResponseUseCase",
    "RouteCaptureRequestRequest",
    "RouteCaptureRequestResponse",
    "RouteCaptureRequestUseCase",
    "ScheduleRemindersRequest",
    "ScheduleRemindersResponse",
    "ScheduleRemindersUseCase",
    "WindowItem",
]
