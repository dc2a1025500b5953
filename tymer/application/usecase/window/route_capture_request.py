"""Route capture request use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from tymer.domain.service import CaptureRequested, Clock, MomentGate

from .get_window_status import WindowItem


class RouteCaptureRequestRequest(BaseModel):
    """Route capture request request."""

    event: CaptureRequested


class RouteCaptureRequestResponse(BaseModel):
    """Whether the capture can still go ahead in its window."""

    window: WindowItem
    window_open: bool
    closes_at: datetime | None = None
    requested_at: datetime


class RouteCaptureRequestUseCase:
    """Use case for a capture request coming off the event channel.

    The reminder that produced the event may have been tapped late, so
    the window carried in the event is checked against the posting gate
    at the time the request is handled.
    """

    def __init__(self, moment_gate: MomentGate, clock: Clock) -> None:
        """Initialize route capture request use case.

        Args:
            moment_gate: Posting gate
            clock: Current time
        """
        self.moment_gate = moment_gate
        self.clock = clock

    async def execute(
        self, request: RouteCaptureRequestRequest
    ) -> RouteCaptureRequestResponse:
        event = request.event
        with logfire.span(
            "route_capture_request.execute", window_label=event.window.label
        ):
            now = self.clock.now()
            window_open = self.moment_gate.is_window_open([event.window], now)
            closes_at = self.moment_gate.time_window_policy.closes_at(now, event.window)

            if window_open:
                logfire.info(
                    "Capture request routed",
                    window_label=event.window.label,
                    action=event.action,
                )
            else:
                logfire.info(
                    "Capture request after window closed",
                    window_label=event.window.label,
                    requested_at=event.requested_at.isoformat(),
                )

            return RouteCaptureRequestResponse(
                window=WindowItem.from_window(event.window),
                window_open=window_open,
                closes_at=closes_at,
                requested_at=event.requested_at,
            )
