"""Moment gate: posting and visibility rules."""

from datetime import datetime
from typing import Collection, Sequence

from tymer.domain.model.moment import Moment
from tymer.domain.model.window import TimeWindow
from tymer.domain.value import UserId

from .base import Service
from .clock import Clock
from .time_window import TimeWindowPolicy


class MomentGate(Service):
    """Decides whether a user may post now and who may see a moment.

    "Today" is always the clock's local calendar day. Comparing in UTC
    would shift the day boundary for anyone not on UTC.

    The one-post-per-day rule is enforced here only, from the latest
    moment the store returns. Two devices posting at the same instant are
    not prevented from both succeeding.
    """

    def __init__(
        self,
        time_window_policy: TimeWindowPolicy,
        clock: Clock,
        always_open: bool = False,
    ) -> None:
        """Initialize moment gate.

        Args:
            time_window_policy: Window policy
            clock: Local clock
            always_open: Demo mode, treat every hour as inside a window
        """
        self.time_window_policy = time_window_policy
        self.clock = clock
        self.always_open = always_open

    def is_window_open(
        self, windows: Sequence[TimeWindow], now: datetime | None = None
    ) -> bool:
        if self.always_open:
            return True
        now = now or self.clock.now()
        return bool(self.time_window_policy.open_windows(now, windows))

    def can_post(
        self,
        windows: Sequence[TimeWindow],
        has_posted_today: bool,
        now: datetime | None = None,
    ) -> bool:
        """True iff a window is open and the user has not posted today."""
        return self.is_window_open(windows, now) and not has_posted_today

    def has_posted_today(self, latest_moment: Moment | None) -> bool:
        """Whether the user's most recent moment was captured today."""
        if latest_moment is None:
            return False
        return self.clock.local_date(latest_moment.captured_at) == self.clock.today()

    def can_view(
        self, moment: Moment, viewer_id: UserId, friend_ids: Collection[UserId]
    ) -> bool:
        """True iff the viewer is the author or a friend, and the moment is from today."""
        if moment.author_id != viewer_id and moment.author_id not in friend_ids:
            return False
        return self.clock.local_date(moment.captured_at) == self.clock.today()
