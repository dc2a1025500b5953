"""Posting window value type."""

from pydantic import Field

from tymer.domain.model.common import DomainModel


class TimeWindow(DomainModel):
    """A daily hour range during which posting is allowed.

    Windows never wrap past midnight. A window with `start == end` is
    always closed. Overlap between windows is not checked here; the
    window configuration must avoid it.
    """

    label: str
    start: int = Field(ge=0, le=23)
    end: int = Field(ge=0, le=23)

    @property
    def display_time(self) -> str:
        """Short label such as `08H-09H`."""
        return f"{self.start:02d}H-{self.end:02d}H"

    def contains_hour(self, hour: int) -> bool:
        """Whether the given hour of day falls inside the window."""
        return self.start <= hour < self.end
