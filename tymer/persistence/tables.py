"""SQLAlchemy table definitions for Tymer.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one per auth user, same id)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("display_name", String(50), nullable=False),
    Column("avatar_color", String(20), nullable=False, server_default="blue"),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# WINDOWS TABLE (posting window configuration, read-only for the app)
# ============================================================================
windows_table = Table(
    "windows",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("label", String(50), nullable=False),
    Column("start_hour", Integer, nullable=False),
    Column("end_hour", Integer, nullable=False),
    CheckConstraint("start_hour BETWEEN 0 AND 23", name="check_window_start_hour"),
    CheckConstraint("end_hour BETWEEN 0 AND 23", name="check_window_end_hour"),
)

# ============================================================================
# MOMENTS TABLE
# ============================================================================
moments_table = Table(
    "moments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("image_path", Text, nullable=True),
    Column("description", String(280), nullable=True),
    Column(
        "captured_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_moments_author_captured", moments_table.c.author_id, moments_table.c.captured_at)
Index("idx_moments_captured_at", moments_table.c.captured_at)

# ============================================================================
# REACTIONS TABLE (text or voice, deleted with their moment)
# ============================================================================
reactions_table = Table(
    "reactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "moment_id",
        UUID,
        ForeignKey("moments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("kind", String(10), nullable=False),  # 'text' or 'voice'
    Column("content", Text, nullable=True),  # Text reactions
    Column("audio_path", Text, nullable=True),  # Voice reactions
    Column("duration", Float, nullable=True),
    Column("waveform", JSONB, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("kind IN ('text', 'voice')", name="check_reaction_kind"),
    CheckConstraint(
        "(kind = 'text' AND content IS NOT NULL) "
        "OR (kind = 'voice' AND audio_path IS NOT NULL)",
        name="check_reaction_payload",
    ),
)

Index("idx_reactions_moment_created", reactions_table.c.moment_id, reactions_table.c.created_at)

# ============================================================================
# FRIENDSHIPS TABLE (directed rows, undirected meaning)
# ============================================================================
friendships_table = Table(
    "friendships",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "friend_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "friend_id", name="uq_friendship_pair"),
    CheckConstraint("user_id <> friend_id", name="check_no_self_friendship"),
    CheckConstraint(
        "status IN ('pending', 'accepted')", name="check_friendship_status"
    ),
)

Index("idx_friendships_user_id", friendships_table.c.user_id)
Index("idx_friendships_friend_id", friendships_table.c.friend_id)

# ============================================================================
# INVITATIONS TABLE (single-use friend codes)
# ============================================================================
invitations_table = Table(
    "invitations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "creator_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("code", String(8), nullable=False, unique=True),
    Column("is_used", Boolean, nullable=False, server_default="false"),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "used_by",
        UUID,
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_invitations_creator_active",
    invitations_table.c.creator_id,
    invitations_table.c.is_used,
)
