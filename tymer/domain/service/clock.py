"""Clock port.

Window gating and "today" checks read time through a Clock so they can
be tested without real time passing.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo


class Clock(ABC):
    """Supplier of the current instant in the device's local timezone."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as a timezone-aware datetime in local time."""
        pass

    def today(self) -> date:
        """Current local calendar day."""
        return self.now().date()

    def local_date(self, moment: datetime) -> date:
        """Local calendar day of an instant.

        Naive datetimes are taken to already be in local time.
        """
        if moment.tzinfo is None:
            return moment.date()
        return moment.astimezone(self.now().tzinfo).date()

    def start_of_today(self) -> datetime:
        """Local midnight of the current day."""
        return self.now().replace(hour=0, minute=0, second=0, microsecond=0)


class SystemClock(Clock):
    """Wall clock, optionally pinned to an IANA timezone."""

    def __init__(self, timezone: str | None = None) -> None:
        self._tz: tzinfo | None = ZoneInfo(timezone) if timezone else None

    def now(self) -> datetime:
        if self._tz is not None:
            return datetime.now(self._tz)
        return datetime.now().astimezone()


class FixedClock(Clock):
    """Clock frozen at a settable instant."""

    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set(self, now: datetime) -> None:
        self._now = now
