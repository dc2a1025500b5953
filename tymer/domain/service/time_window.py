"""Time window policy."""

from datetime import datetime, timedelta
from typing import Sequence

from tymer.domain.model.window import TimeWindow

from .base import Service


class TimeWindowPolicy(Service):
    """Decides which windows are open at a given instant.

    Stateless: every method is a pure function of its arguments. Windows
    are same-day hour ranges `[start, end)`; nothing wraps past midnight.
    """

    def open_windows(
        self, now: datetime, windows: Sequence[TimeWindow]
    ) -> list[TimeWindow]:
        """Windows open at `now`, in start order, without duplicates.

        A window is open when `start <= hour(now) < end`, so a window with
        `start == end` never opens.
        """
        hour = now.hour
        opened: list[TimeWindow] = []
        for window in sorted(windows, key=lambda w: (w.start, w.end)):
            if window.contains_hour(hour) and window not in opened:
                opened.append(window)
        return opened

    def current_window(
        self, now: datetime, windows: Sequence[TimeWindow]
    ) -> TimeWindow | None:
        """The first open window, if any."""
        opened = self.open_windows(now, windows)
        return opened[0] if opened else None

    def next_window(
        self, now: datetime, windows: Sequence[TimeWindow]
    ) -> TimeWindow | None:
        """The next window to open after the current hour.

        Picks the smallest start strictly after the current hour. When no
        window is left today, the earliest window is returned and should be
        read as "tomorrow".
        """
        if not windows:
            return None
        ordered = sorted(windows, key=lambda w: (w.start, w.end))
        for window in ordered:
            if window.start > now.hour:
                return window
        return ordered[0]

    def next_opening(
        self, now: datetime, windows: Sequence[TimeWindow]
    ) -> datetime | None:
        """Concrete instant at which `next_window` opens."""
        window = self.next_window(now, windows)
        if window is None:
            return None
        opening = now.replace(hour=window.start, minute=0, second=0, microsecond=0)
        if window.start <= now.hour:
            opening += timedelta(days=1)
        return opening

    def closes_at(self, now: datetime, window: TimeWindow) -> datetime | None:
        """End of `window` today, or None when it is not open at `now`."""
        if not window.contains_hour(now.hour):
            return None
        return now.replace(hour=window.end, minute=0, second=0, microsecond=0)

    def remaining(self, now: datetime, window: TimeWindow) -> timedelta | None:
        """Time left before `window` closes, or None when it is closed."""
        closing = self.closes_at(now, window)
        if closing is None:
            return None
        return closing - now
