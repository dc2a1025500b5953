"""Clock infrastructure providers."""

from dishka import Scope, provide

from tymer.config import WindowSettings
from tymer.domain.service import Clock, SystemClock
from tymer.util.di.base import ProviderBase


class ClockProvider(ProviderBase):
    """Clock component base."""

    __mock_component__ = "clock"


class ProdClockProvider(ClockProvider):
    """Production clock reading wall time."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_clock(self, window_settings: WindowSettings) -> Clock:
        """Provide system clock in the configured timezone."""
        return SystemClock(window_settings.timezone)
