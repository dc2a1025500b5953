"""Domain value objects for Tymer.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from tymer.domain.value.common import RootValueObject

INVITE_CODE_ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
INVITE_CODE_LENGTH = 8


class AvatarColor(str, Enum):
    """Palette of avatar colors a profile can pick from."""

    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    ORANGE = "orange"
    PURPLE = "purple"
    PINK = "pink"
    CYAN = "cyan"
    YELLOW = "yellow"
    MINT = "mint"
    INDIGO = "indigo"
    TEAL = "teal"
    BROWN = "brown"
    WHITE = "white"
    GRAY = "gray"

    @classmethod
    def parse(cls, name: str | None) -> "AvatarColor":
        """Parse a stored color name, falling back to blue for unknown names."""
        if not name:
            return cls.BLUE
        try:
            return cls(name.strip().lower())
        except ValueError:
            return cls.BLUE


class FriendshipStatus(str, Enum):
    """Status of a friendship row."""

    PENDING = "pending"
    ACCEPTED = "accepted"


class ReactionKind(str, Enum):
    """Kind of reaction attached to a moment."""

    TEXT = "text"
    VOICE = "voice"


class InviteCode(RootValueObject[str]):
    """Shareable invitation code.

    Eight characters over a 32-symbol alphabet that leaves out the
    visually confusable 0/O and 1/I. Input is upper-cased and stripped.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Upper-case and strip raw input."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("root")
    @classmethod
    def validate_code_format(cls, v: str) -> str:
        """Validate length and alphabet."""
        if not re.fullmatch(f"[{INVITE_CODE_ALPHABET}]{{{INVITE_CODE_LENGTH}}}", v):
            raise ValueError(
                f"Invite code must be {INVITE_CODE_LENGTH} characters from "
                f"{INVITE_CODE_ALPHABET}"
            )
        return v
