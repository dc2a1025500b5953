"""Get window status use case."""

from datetime import datetime

from pydantic import BaseModel

from tymer.application.usecase.base import require_user
from tymer.domain.model import TimeWindow
from tymer.domain.service import Clock, MomentService, WindowService


class WindowItem(BaseModel):
    """A posting window."""

    label: str
    start_hour: int
    end_hour: int
    display_time: str

    @classmethod
    def from_window(cls, window: TimeWindow) -> "WindowItem":
        return cls(
            label=window.label,
            start_hour=window.start,
            end_hour=window.end,
            display_time=window.display_time,
        )


class GetWindowStatusRequest(BaseModel):
    """Get window status request."""

    user_id: str | None = None  # From the session, optional


class GetWindowStatusResponse(BaseModel):
    """Get window status response.

    `can_post` and `has_posted_today` are only filled for a signed-in user.
    """

    now: datetime
    windows: list[WindowItem]
    is_open: bool
    current: WindowItem | None
    next: WindowItem | None
    next_opening: datetime | None
    remaining_seconds: int | None
    can_post: bool | None = None
    has_posted_today: bool | None = None


class GetWindowStatusUseCase:
    """Use case for rendering the window gate.

    Works without a session; posting eligibility is added when the
    caller is signed in.
    """

    def __init__(
        self,
        window_service: WindowService,
        moment_service: MomentService,
        clock: Clock,
    ) -> None:
        """Initialize get window status use case.

        Args:
            window_service: Window configuration service
            moment_service: Moment domain service (posting eligibility)
            clock: Local clock
        """
        self.window_service = window_service
        self.moment_service = moment_service
        self.clock = clock

    async def execute(self, request: GetWindowStatusRequest) -> GetWindowStatusResponse:
        status = await self.window_service.status(self.clock.now())
        gate = self.moment_service.moment_gate

        response = GetWindowStatusResponse(
            now=status.now,
            windows=[WindowItem.from_window(w) for w in status.windows],
            is_open=gate.is_window_open(status.windows, status.now),
            current=WindowItem.from_window(status.current) if status.current else None,
            next=WindowItem.from_window(status.next) if status.next else None,
            next_opening=status.next_opening,
            remaining_seconds=(
                int(status.remaining.total_seconds()) if status.remaining else None
            ),
        )

        if request.user_id:
            user_id = require_user(request.user_id)
            posted = await self.moment_service.has_posted_today(user_id)
            response.has_posted_today = posted
            response.can_post = gate.can_post(status.windows, posted, status.now)

        return response
