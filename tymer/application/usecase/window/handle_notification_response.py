"""Handle notification response use case."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from tymer.domain.service import NotificationScheduler

from .get_window_status import WindowItem


class HandleNotificationResponseRequest(BaseModel):
    """Handle notification response request."""

    action: str
    payload: dict[str, Any] = {}


class HandleNotificationResponseResponse(BaseModel):
    """Outcome of a reminder interaction."""

    capture_requested: bool
    window: WindowItem | None = None
    requested_at: datetime | None = None


class HandleNotificationResponseUseCase:
    """Use case for a user interacting with a window reminder."""

    def __init__(self, notification_scheduler: NotificationScheduler) -> None:
        """Initialize handle notification response use case.

        Args:
            notification_scheduler: Reminder scheduler
        """
        self.notification_scheduler = notification_scheduler

    async def execute(
        self, request: HandleNotificationResponseRequest
    ) -> HandleNotificationResponseResponse:
        event = await self.notification_scheduler.handle_response(
            request.action, request.payload
        )
        if event is None:
            return HandleNotificationResponseResponse(capture_requested=False)

        return HandleNotificationResponseResponse(
            capture_requested=True,
            window=WindowItem.from_window(event.window),
            requested_at=event.requested_at,
        )
