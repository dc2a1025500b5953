"""Capture event channel.

When a window reminder is tapped, the scheduler publishes a typed
`CaptureRequested` event here. Consumers subscribe and receive every
event published after they subscribed.
"""

import asyncio
from contextlib import asynccontextmanager
from datetime import datetime
from typing import AsyncIterator

import logfire
from pydantic import BaseModel

from tymer.domain.model.window import TimeWindow


class CaptureRequested(BaseModel):
    """The user asked to capture a moment from a window reminder."""

    window: TimeWindow
    action: str
    requested_at: datetime


class CaptureEventChannel:
    """In-process fan-out of capture events to subscriber queues."""

    def __init__(self, max_queue_size: int = 100) -> None:
        self._subscribers: set[asyncio.Queue[CaptureRequested]] = set()
        self._max_queue_size = max_queue_size

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue[CaptureRequested]:
        queue: asyncio.Queue[CaptureRequested] = asyncio.Queue(
            maxsize=self._max_queue_size
        )
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[CaptureRequested]) -> None:
        self._subscribers.discard(queue)

    @asynccontextmanager
    async def subscription(self) -> AsyncIterator[asyncio.Queue[CaptureRequested]]:
        """Subscribe for the duration of an `async with` block."""
        queue = self.subscribe()
        try:
            yield queue
        finally:
            self.unsubscribe(queue)

    def publish(self, event: CaptureRequested) -> int:
        """Deliver an event to every subscriber.

        A subscriber whose queue is full misses the event.

        Returns:
            Number of subscribers that received the event
        """
        delivered = 0
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logfire.warn(
                    "Capture event dropped, subscriber queue full",
                    window_label=event.window.label,
                )
        logfire.info(
            "Capture event published",
            window_label=event.window.label,
            delivered=delivered,
        )
        return delivered
