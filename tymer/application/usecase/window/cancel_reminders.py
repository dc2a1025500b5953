"""Cancel window reminders use case."""

from pydantic import BaseModel

from tymer.domain.service import NotificationScheduler


class CancelRemindersRequest(BaseModel):
    """Cancel reminders request."""

    pass


class CancelRemindersResponse(BaseModel):
    """Cancel reminders response."""

    cancelled: int


class CancelRemindersUseCase:
    """Use case for removing every window reminder, leaving other reminders."""

    def __init__(self, notification_scheduler: NotificationScheduler) -> None:
        """Initialize cancel reminders use case.

        Args:
            notification_scheduler: Reminder scheduler
        """
        self.notification_scheduler = notification_scheduler

    async def execute(self, request: CancelRemindersRequest) -> CancelRemindersResponse:
        cancelled = await self.notification_scheduler.cancel_all()
        return CancelRemindersResponse(cancelled=cancelled)
