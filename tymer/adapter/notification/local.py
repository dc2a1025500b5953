"""Process-local notification platform.

Keeps the installed triggers in memory for the lifetime of the process.
It stands in for the device scheduler wherever no device is attached,
including the HTTP service and tests.
"""

from typing import Sequence

import logfire

from tymer.domain.service.notification_scheduler import (
    AuthorizationStatus,
    DailyFireSpec,
    NotificationContent,
    NotificationPlatform,
    WindowTrigger,
)


class LocalNotificationPlatform(NotificationPlatform):
    """In-process registry of pending reminders."""

    def __init__(
        self,
        status: AuthorizationStatus = AuthorizationStatus.NOT_DETERMINED,
        grant_on_request: bool = True,
    ) -> None:
        """Initialize the registry.

        Args:
            status: Initial permission state
            grant_on_request: Answer given when permission is requested
        """
        self.status = status
        self.grant_on_request = grant_on_request
        self.pending: dict[str, WindowTrigger] = {}
        self.badge = 0

    async def authorization_status(self) -> AuthorizationStatus:
        return self.status

    async def request_authorization(self) -> bool:
        # The user is asked only once
        if self.status == AuthorizationStatus.NOT_DETERMINED:
            self.status = (
                AuthorizationStatus.AUTHORIZED
                if self.grant_on_request
                else AuthorizationStatus.DENIED
            )
        return self.status == AuthorizationStatus.AUTHORIZED

    async def install(
        self, trigger_id: str, fire: DailyFireSpec, content: NotificationContent
    ) -> None:
        self.pending[trigger_id] = WindowTrigger(
            trigger_id=trigger_id, fire=fire, content=content
        )
        logfire.debug("Trigger installed", trigger_id=trigger_id, hour=fire.hour)

    async def list_pending(self) -> list[str]:
        return list(self.pending)

    async def cancel(self, trigger_ids: Sequence[str]) -> None:
        for trigger_id in trigger_ids:
            self.pending.pop(trigger_id, None)

    async def cancel_all(self) -> None:
        self.pending.clear()

    async def set_badge(self, count: int) -> None:
        self.badge = count
