"""Window reminder scheduling.

Turns the window configuration into one recurring local reminder per
window. The platform that actually fires reminders sits behind the
`NotificationPlatform` port.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Mapping, Sequence

import logfire
from pydantic import BaseModel, ValidationError

from tymer.config import NotificationSettings
from tymer.domain.model.window import TimeWindow

from .base import Service
from .capture_events import CaptureEventChannel, CaptureRequested
from .clock import Clock


class AuthorizationStatus(str, Enum):
    """Notification permission state reported by the platform."""

    NOT_DETERMINED = "not_determined"
    DENIED = "denied"
    AUTHORIZED = "authorized"


class NotificationAction(str, Enum):
    """Actions a user can take on a window reminder."""

    CAPTURE = "CAPTURE_ACTION"
    DISMISS = "DISMISS_ACTION"
    DEFAULT = "DEFAULT_ACTION"  # Plain tap on the notification


class DailyFireSpec(BaseModel):
    """Fire every day at a local wall-clock time."""

    hour: int
    minute: int = 0
    second: int = 0
    repeats: bool = True


class NotificationContent(BaseModel):
    """What a reminder shows and carries."""

    title: str
    body: str
    category: str
    badge: int = 1
    payload: dict[str, Any] = {}


class WindowTrigger(BaseModel):
    """A reminder the scheduler wants installed."""

    trigger_id: str
    fire: DailyFireSpec
    content: NotificationContent


class NotificationPlatform(ABC):
    """Port to the platform notification scheduler.

    Installed triggers are process-wide state owned by the platform.
    """

    @abstractmethod
    async def authorization_status(self) -> AuthorizationStatus:
        pass

    @abstractmethod
    async def request_authorization(self) -> bool:
        """Ask the user for permission.

        Returns:
            Whether permission was granted
        """
        pass

    @abstractmethod
    async def install(
        self, trigger_id: str, fire: DailyFireSpec, content: NotificationContent
    ) -> None:
        """Install or replace a trigger."""
        pass

    @abstractmethod
    async def list_pending(self) -> list[str]:
        """IDs of every pending trigger, ours or not."""
        pass

    @abstractmethod
    async def cancel(self, trigger_ids: Sequence[str]) -> None:
        pass

    @abstractmethod
    async def cancel_all(self) -> None:
        pass

    @abstractmethod
    async def set_badge(self, count: int) -> None:
        pass


class NotificationScheduler(Service):
    """Keeps one daily reminder per window installed on the platform.

    Trigger IDs are derived from `(start, end)`, and `schedule` clears
    every trigger under the prefix before installing the wanted set. The
    installed set therefore converges on the window list: repeated calls
    are no-ops, and removed or reworded windows leave nothing stale.
    Reminders from other features never carry the prefix and are left alone.
    """

    def __init__(
        self,
        platform: NotificationPlatform,
        settings: NotificationSettings,
        capture_events: CaptureEventChannel,
        clock: Clock,
    ) -> None:
        """Initialize notification scheduler.

        Args:
            platform: Platform notification port
            settings: Reminder settings (prefix, copy)
            capture_events: Channel receiving capture requests
            clock: Stamps capture requests
        """
        self.platform = platform
        self.settings = settings
        self.capture_events = capture_events
        self.clock = clock

    def trigger_id(self, window: TimeWindow) -> str:
        return f"{self.settings.id_prefix}{window.start}_{window.end}"

    def message_for(self, window: TimeWindow) -> str:
        """Reminder body, stable for a given start hour."""
        messages = self.settings.messages
        template = messages[window.start % len(messages)]
        return template.format(label=window.label.lower())

    def build_trigger(self, window: TimeWindow) -> WindowTrigger:
        return WindowTrigger(
            trigger_id=self.trigger_id(window),
            fire=DailyFireSpec(hour=window.start),
            content=NotificationContent(
                title=self.settings.title,
                body=self.message_for(window),
                category=self.settings.category,
                payload={
                    "window_label": window.label,
                    "window_start": window.start,
                    "window_end": window.end,
                },
            ),
        )

    def desired_triggers(self, windows: Sequence[TimeWindow]) -> list[WindowTrigger]:
        """One trigger per distinct `(start, end)`, first label wins."""
        triggers: dict[str, WindowTrigger] = {}
        for window in windows:
            trigger = self.build_trigger(window)
            triggers.setdefault(trigger.trigger_id, trigger)
        return list(triggers.values())

    async def is_authorized(self) -> bool:
        status = await self.platform.authorization_status()
        return status == AuthorizationStatus.AUTHORIZED

    async def request_authorization(self) -> bool:
        with logfire.span("notification_scheduler.request_authorization"):
            granted = await self.platform.request_authorization()
            logfire.info("Notification permission answered", granted=granted)
            return granted

    async def schedule(self, windows: Sequence[TimeWindow]) -> int:
        """Converge installed reminders on `windows`.

        Without permission nothing is touched and 0 is returned.

        Args:
            windows: Current window configuration

        Returns:
            Number of windows scheduled
        """
        with logfire.span("notification_scheduler.schedule", window_count=len(windows)):
            desired = self.desired_triggers(windows)

            if not await self.is_authorized():
                logfire.warn("Cannot schedule reminders: not authorized")
                return 0

            cancelled = await self._cancel_owned()
            for trigger in desired:
                await self.platform.install(
                    trigger.trigger_id, trigger.fire, trigger.content
                )

            logfire.info(
                "Window reminders scheduled",
                scheduled=len(desired),
                cancelled=cancelled,
            )
            return len(desired)

    async def cancel_all(self) -> int:
        """Remove every reminder owned by the scheduler.

        Returns:
            Number of reminders removed
        """
        with logfire.span("notification_scheduler.cancel_all"):
            cancelled = await self._cancel_owned()
            logfire.info("Window reminders cancelled", cancelled=cancelled)
            return cancelled

    async def _cancel_owned(self) -> int:
        pending = await self.platform.list_pending()
        owned = [tid for tid in pending if tid.startswith(self.settings.id_prefix)]
        if owned:
            await self.platform.cancel(owned)
        return len(owned)

    async def handle_response(
        self, action: str, payload: Mapping[str, Any]
    ) -> CaptureRequested | None:
        """Route a reminder interaction.

        Capture and plain taps publish a `CaptureRequested` built from the
        trigger payload, so the window list is not re-read. Dismissal
        clears the badge.

        Returns:
            The published event, or None when nothing was published
        """
        with logfire.span("notification_scheduler.handle_response", action=action):
            if action == NotificationAction.DISMISS.value:
                await self.platform.set_badge(0)
                return None

            if action not in (
                NotificationAction.CAPTURE.value,
                NotificationAction.DEFAULT.value,
            ):
                logfire.info("Ignoring unknown notification action", action=action)
                return None

            try:
                window = TimeWindow(
                    label=payload["window_label"],
                    start=payload["window_start"],
                    end=payload["window_end"],
                )
            except (KeyError, ValidationError) as e:
                logfire.warn("Malformed reminder payload", error=str(e))
                return None

            event = CaptureRequested(
                window=window, action=action, requested_at=self.clock.now()
            )
            self.capture_events.publish(event)
            return event
