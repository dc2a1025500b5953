"""Application startup and shutdown.

At startup the window reminders are scheduled once and a background task
subscribes to the capture event channel. Each capture request is routed
in its own request scope, like an HTTP request.
"""

import asyncio
from contextlib import AbstractAsyncContextManager, asynccontextmanager, suppress
from typing import AsyncIterator, Callable

from dishka import AsyncContainer
from fastapi import FastAPI
import logfire

from tymer.application.usecase.window import (
    RouteCaptureRequestRequest,
    RouteCaptureRequestResponse,
    RouteCaptureRequestUseCase,
    ScheduleRemindersRequest,
    ScheduleRemindersResponse,
    ScheduleRemindersUseCase,
)
from tymer.config import NotificationSettings
from tymer.domain.error import DomainError
from tymer.domain.service import CaptureEventChannel, CaptureRequested


async def schedule_reminders(
    container: AsyncContainer,
) -> ScheduleRemindersResponse | None:
    """Install the daily reminders for the current window set.

    Returns:
        The scheduling outcome, or None when it failed
    """
    settings = await container.get(NotificationSettings)
    async with container() as request_container:
        use_case = await request_container.get(ScheduleRemindersUseCase)
        try:
            response = await use_case.execute(
                ScheduleRemindersRequest(
                    request_authorization=settings.authorize_on_startup
                )
            )
        except DomainError as e:
            logfire.warn("Startup reminder scheduling failed", error=str(e))
            return None

    logfire.info(
        "Startup reminders scheduled",
        authorized=response.authorized,
        scheduled=response.scheduled,
    )
    return response


async def route_capture_request(
    container: AsyncContainer, event: CaptureRequested
) -> RouteCaptureRequestResponse | None:
    """Route one capture request.

    Returns:
        The routing outcome, or None when it failed
    """
    async with container() as request_container:
        use_case = await request_container.get(RouteCaptureRequestUseCase)
        try:
            return await use_case.execute(RouteCaptureRequestRequest(event=event))
        except DomainError as e:
            logfire.warn(
                "Capture request routing failed",
                window_label=event.window.label,
                error=str(e),
            )
            return None


async def consume_capture_requests(
    container: AsyncContainer, queue: asyncio.Queue[CaptureRequested]
) -> None:
    """Route capture requests until cancelled."""
    while True:
        event = await queue.get()
        try:
            await route_capture_request(container, event)
        except Exception:
            # One bad event must not stop the consumer
            logfire.exception(
                "Capture request consumer error", window_label=event.window.label
            )
        finally:
            queue.task_done()


def build_lifespan(
    container: AsyncContainer,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Build the lifespan handler bound to the application container.

    The capture queue is exposed as `app.state.capture_requests`.

    Args:
        container: Application DI container, closed at shutdown

    Returns:
        Lifespan context manager factory for FastAPI
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await schedule_reminders(container)

        channel = await container.get(CaptureEventChannel)
        queue = channel.subscribe()
        app.state.capture_requests = queue
        consumer = asyncio.create_task(consume_capture_requests(container, queue))
        logfire.info("Capture request consumer started")

        try:
            yield
        finally:
            consumer.cancel()
            with suppress(asyncio.CancelledError):
                await consumer
            channel.unsubscribe(queue)
            await container.close()
            logfire.info("Application shut down")

    return lifespan
