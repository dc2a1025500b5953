"""Time window repository interface."""

from abc import ABC, abstractmethod

from tymer.domain.model.window import TimeWindow


class WindowRepository(ABC):
    """Read-only access to the posting window configuration."""

    @abstractmethod
    async def list_all(self) -> list[TimeWindow]:
        """Return every configured window ordered by start hour."""
        pass
