"""In-memory window repository for testing."""

from tymer.domain.error import TransientError
from tymer.domain.model import TimeWindow
from tymer.domain.repository import WindowRepository


class InMemoryWindowRepository(WindowRepository):
    """In-memory implementation of WindowRepository for testing.

    Set `unavailable` to simulate an unreachable store.
    """

    def __init__(self, windows: list[TimeWindow] | None = None) -> None:
        self._windows: list[TimeWindow] = list(windows or [])
        self.unavailable = False
        self.calls = 0

    def set_windows(self, windows: list[TimeWindow]) -> None:
        self._windows = list(windows)

    async def list_all(self) -> list[TimeWindow]:
        self.calls += 1
        if self.unavailable:
            raise TransientError("Window store unavailable")
        return sorted(self._windows, key=lambda w: (w.start, w.end))
