"""Schedule window reminders use case."""

import logfire
from pydantic import BaseModel

from tymer.domain.service import NotificationScheduler, WindowService


class ScheduleRemindersRequest(BaseModel):
    """Schedule reminders request."""

    request_authorization: bool = False
    refresh_windows: bool = False


class ScheduleRemindersResponse(BaseModel):
    """Schedule reminders response."""

    authorized: bool
    scheduled: int


class ScheduleRemindersUseCase:
    """Use case for installing one daily reminder per window.

    Run at startup and whenever the window set changes. Running it again
    with the same windows leaves the installed reminders unchanged.
    """

    def __init__(
        self,
        window_service: WindowService,
        notification_scheduler: NotificationScheduler,
    ) -> None:
        """Initialize schedule reminders use case.

        Args:
            window_service: Window configuration service
            notification_scheduler: Reminder scheduler
        """
        self.window_service = window_service
        self.notification_scheduler = notification_scheduler

    async def execute(
        self, request: ScheduleRemindersRequest
    ) -> ScheduleRemindersResponse:
        with logfire.span("schedule_reminders.execute"):
            if request.request_authorization:
                await self.notification_scheduler.request_authorization()

            if request.refresh_windows:
                windows = await self.window_service.refresh()
            else:
                windows = await self.window_service.list_windows()

            scheduled = await self.notification_scheduler.schedule(windows)
            return ScheduleRemindersResponse(
                authorized=await self.notification_scheduler.is_authorized(),
                scheduled=scheduled,
            )
