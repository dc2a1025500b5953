"""Response items shared by several use cases."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from tymer.domain.model import Moment, Profile, Reaction, VoiceReaction
from tymer.domain.service import MediaService


class ProfileItem(BaseModel):
    """Public view of a profile."""

    user_id: str
    display_name: str
    initials: str
    avatar_color: str
    avatar_url: str | None

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileItem":
        return cls(
            user_id=str(profile.id),
            display_name=profile.display_name,
            initials=profile.initials,
            avatar_color=profile.avatar_color.value,
            avatar_url=profile.avatar_url,
        )


class ReactionItem(BaseModel):
    """A reaction as shown under a moment."""

    reaction_id: str
    moment_id: str
    author: ProfileItem | None
    kind: Literal["text", "voice"]
    content: str | None = None
    audio_url: str | None = None
    duration: float | None = None
    waveform: list[float] | None = None
    created_at: datetime

    @classmethod
    def from_reaction(cls, reaction: Reaction, media: MediaService) -> "ReactionItem":
        item = cls(
            reaction_id=str(reaction.id),
            moment_id=str(reaction.moment_id),
            author=ProfileItem.from_profile(reaction.author) if reaction.author else None,
            kind=reaction.content.kind,
            created_at=reaction.created_at,
        )
        if isinstance(reaction.content, VoiceReaction):
            item.audio_url = media.voice_reaction_url(reaction.content.audio_path)
            item.duration = reaction.content.duration
            item.waveform = reaction.content.waveform
        else:
            item.content = reaction.content.content
        return item


class MomentItem(BaseModel):
    """A moment with its author and reactions."""

    moment_id: str
    author: ProfileItem | None
    image_url: str | None
    description: str | None
    captured_at: datetime
    reactions: list[ReactionItem]

    @classmethod
    def from_moment(cls, moment: Moment, media: MediaService) -> "MomentItem":
        return cls(
            moment_id=str(moment.id),
            author=ProfileItem.from_profile(moment.author) if moment.author else None,
            image_url=(
                media.moment_image_url(moment.image_path) if moment.image_path else None
            ),
            description=moment.description,
            captured_at=moment.captured_at,
            reactions=[ReactionItem.from_reaction(r, media) for r in moment.reactions],
        )
