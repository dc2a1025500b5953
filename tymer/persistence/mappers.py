"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from tymer.domain.model import (
    Friendship,
    Invitation,
    Moment,
    Profile,
    Reaction,
    TextReaction,
    TimeWindow,
    VoiceReaction,
)
from tymer.domain.value import (
    AvatarColor,
    FriendshipId,
    FriendshipStatus,
    InvitationId,
    InviteCode,
    MomentId,
    ReactionId,
    ReactionKind,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_profile(row: Dict[str, Any]) -> Profile:
    """Convert database row to Profile domain model."""
    return Profile(
        id=UserId(_uuid(row["id"])),
        display_name=row["display_name"],
        avatar_color=AvatarColor.parse(row.get("avatar_color")),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def profile_to_dict(profile: Profile) -> Dict[str, Any]:
    return {
        "id": profile.id,
        "display_name": profile.display_name,
        "avatar_color": profile.avatar_color.value,
        "avatar_url": profile.avatar_url,
        "created_at": profile.created_at,
        "updated_at": profile.updated_at,
    }


def row_to_window(row: Dict[str, Any]) -> TimeWindow:
    """Convert a window configuration row."""
    return TimeWindow(
        label=row["label"], start=row["start_hour"], end=row["end_hour"]
    )


def row_to_reaction(
    row: Dict[str, Any], author: Optional[Profile] = None
) -> Reaction:
    """Convert database row to Reaction domain model.

    Args:
        row: Database row as dict
        author: Author profile when already loaded

    Returns:
        Reaction with a text or voice payload depending on `kind`
    """
    if row["kind"] == ReactionKind.VOICE.value:
        content: TextReaction | VoiceReaction = VoiceReaction(
            duration=row["duration"],
            audio_path=row["audio_path"],
            waveform=row.get("waveform"),
        )
    else:
        content = TextReaction(content=row["content"])

    return Reaction(
        id=ReactionId(_uuid(row["id"])),
        moment_id=MomentId(_uuid(row["moment_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=content,
        author=author,
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": reaction.id,
        "moment_id": reaction.moment_id,
        "author_id": reaction.author_id,
        "kind": reaction.content.kind,
        "content": None,
        "audio_path": None,
        "duration": None,
        "waveform": None,
        "created_at": reaction.created_at,
    }
    if isinstance(reaction.content, VoiceReaction):
        data["audio_path"] = reaction.content.audio_path
        data["duration"] = reaction.content.duration
        data["waveform"] = reaction.content.waveform
    else:
        data["content"] = reaction.content.content
    return data


def row_to_moment(
    row: Dict[str, Any],
    author: Optional[Profile] = None,
    reactions: Optional[list[Reaction]] = None,
) -> Moment:
    """Convert database row to Moment domain model.

    Args:
        row: Database row as dict
        author: Author profile when already loaded
        reactions: Reactions, oldest first

    Returns:
        Moment domain model
    """
    return Moment(
        id=MomentId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        image_path=row.get("image_path"),
        description=row.get("description"),
        captured_at=row["captured_at"],
        created_at=row["created_at"],
        author=author,
        reactions=reactions or [],
    )


def moment_to_dict(moment: Moment) -> Dict[str, Any]:
    """Columns of a moment; nested author and reactions are not stored here."""
    return moment.model_dump(exclude={"author", "reactions"})


def row_to_friendship(row: Dict[str, Any]) -> Friendship:
    """Convert database row to Friendship domain model."""
    return Friendship(
        id=FriendshipId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        friend_id=UserId(_uuid(row["friend_id"])),
        status=FriendshipStatus(row["status"]),
        created_at=row["created_at"],
    )


def friendship_to_dict(friendship: Friendship) -> Dict[str, Any]:
    data = friendship.model_dump()
    data["status"] = friendship.status.value
    return data


def row_to_invitation(row: Dict[str, Any]) -> Invitation:
    """Convert database row to Invitation domain model."""
    used_by = row.get("used_by")
    return Invitation(
        id=InvitationId(_uuid(row["id"])),
        creator_id=UserId(_uuid(row["creator_id"])),
        code=InviteCode(row["code"]),
        is_used=row["is_used"],
        expires_at=row.get("expires_at"),
        created_at=row["created_at"],
        used_by=UserId(_uuid(used_by)) if used_by else None,
        used_at=row.get("used_at"),
    )


def invitation_to_dict(invitation: Invitation) -> Dict[str, Any]:
    data = invitation.model_dump()
    data["code"] = invitation.code.root
    return data
