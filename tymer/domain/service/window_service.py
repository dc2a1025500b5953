"""Posting window configuration service."""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta

import logfire

from tymer.config import WindowSettings
from tymer.domain.error import TransientError
from tymer.domain.model.window import TimeWindow
from tymer.domain.repository import WindowRepository

from .base import Service
from .time_window import TimeWindowPolicy


class WindowCatalog:
    """Process-wide cache of the window configuration.

    Windows do not change within a session, so they are loaded once and
    kept until `invalidate` is called.
    """

    def __init__(self) -> None:
        self.windows: list[TimeWindow] | None = None
        self.lock = asyncio.Lock()

    def invalidate(self) -> None:
        self.windows = None


@dataclass
class WindowStatus:
    """Snapshot of the window state at one instant."""

    now: datetime
    windows: list[TimeWindow]
    open_windows: list[TimeWindow]
    current: TimeWindow | None
    next: TimeWindow | None
    next_opening: datetime | None
    remaining: timedelta | None

    @property
    def is_open(self) -> bool:
        return bool(self.open_windows)


class WindowService(Service):
    """Loads window configuration and describes the current window state."""

    def __init__(
        self,
        window_repository: WindowRepository,
        catalog: WindowCatalog,
        time_window_policy: TimeWindowPolicy,
        settings: WindowSettings,
    ) -> None:
        """Initialize window service.

        Args:
            window_repository: Window repository
            catalog: Shared window cache
            time_window_policy: Window policy
            settings: Window settings (fallback windows)
        """
        self.window_repository = window_repository
        self.catalog = catalog
        self.time_window_policy = time_window_policy
        self.settings = settings

    def default_windows(self) -> list[TimeWindow]:
        return [
            TimeWindow(label=d.label, start=d.start_hour, end=d.end_hour)
            for d in self.settings.defaults
        ]

    async def list_windows(self) -> list[TimeWindow]:
        """Return the configured windows, loading them on first use.

        When the store is unreachable and nothing was cached yet, the
        configured defaults are returned without being cached, so the next
        call tries the store again. An empty table is a valid
        configuration and is cached as such.

        Returns:
            Windows ordered by start hour
        """
        if self.catalog.windows is not None:
            return self.catalog.windows

        async with self.catalog.lock:
            if self.catalog.windows is not None:
                return self.catalog.windows

            with logfire.span("window_service.list_windows"):
                try:
                    windows = await self.window_repository.list_all()
                except TransientError as e:
                    logfire.warn(
                        "Window store unavailable, using default windows",
                        error=str(e),
                    )
                    return self.default_windows()

                self.catalog.windows = windows
                logfire.info("Windows loaded", count=len(windows))
                return windows

    async def refresh(self) -> list[TimeWindow]:
        """Drop the cache and reload."""
        self.catalog.invalidate()
        return await self.list_windows()

    async def status(self, now: datetime) -> WindowStatus:
        """Describe which windows are open at `now` and what comes next."""
        windows = await self.list_windows()
        policy = self.time_window_policy
        opened = policy.open_windows(now, windows)
        current = opened[0] if opened else None
        return WindowStatus(
            now=now,
            windows=windows,
            open_windows=opened,
            current=current,
            next=policy.next_window(now, windows),
            next_opening=policy.next_opening(now, windows),
            remaining=policy.remaining(now, current) if current else None,
        )
