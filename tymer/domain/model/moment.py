"""Moment and reaction entities.

A moment is one user's post for the day. Reactions are the text or
voice answers friends leave on it.
"""

from datetime import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from tymer.domain.model.common import DomainModel
from tymer.domain.model.profile import Profile
from tymer.domain.value import MomentId, ReactionId, UserId


class TextReaction(DomainModel):
    """Written reaction."""

    kind: Literal["text"] = "text"
    content: str = Field(min_length=1, max_length=500)


class VoiceReaction(DomainModel):
    """Short recorded reaction stored in the blob store."""

    kind: Literal["voice"] = "voice"
    duration: float = Field(gt=0)
    audio_path: str
    waveform: Optional[list[float]] = None


ReactionContent = Annotated[
    Union[TextReaction, VoiceReaction], Field(discriminator="kind")
]


class Reaction(DomainModel):
    """Reaction entity.

    Belongs to exactly one moment and one author. Never mutated; removed
    only when its moment is deleted.
    """

    id: ReactionId
    moment_id: MomentId
    author_id: UserId
    content: ReactionContent
    author: Optional[Profile] = None
    created_at: datetime = Field(default_factory=datetime.now)


class Moment(DomainModel):
    """Moment aggregate root.

    Business rules:
    - At most one moment per author and local calendar day (checked at creation)
    - Only the author deletes a moment; deletion removes its image and reactions
    - Visible to the author and the author's friends on the day it was captured
    """

    id: MomentId
    author_id: UserId
    image_path: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=280)
    captured_at: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)

    # Nested projections, filled by repositories when joined
    author: Optional[Profile] = None
    reactions: list[Reaction] = Field(default_factory=list)
