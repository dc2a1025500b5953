"""Profile aggregate root.

A profile is the public identity of a user: a display name, an avatar
color from the palette and an optional avatar picture.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from tymer.domain.model.common import DomainModel
from tymer.domain.value import AvatarColor, UserId


class Profile(DomainModel):
    """Profile of a user.

    The id never changes. Name and avatar are updated by the owner only.
    """

    id: UserId
    display_name: str = Field(min_length=1, max_length=50)
    avatar_color: AvatarColor = AvatarColor.BLUE
    avatar_url: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("avatar_color", mode="before")
    @classmethod
    def parse_avatar_color(cls, v: object) -> object:
        """Accept any stored color name, unknown names become blue."""
        if v is None or isinstance(v, str):
            return AvatarColor.parse(v)
        return v

    @property
    def initials(self) -> str:
        """Upper-cased first letter of the display name."""
        return self.display_name[:1].upper()
