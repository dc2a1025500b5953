"""initial_schema

Create the schema for Tymer:
- Profiles (one per auth user, same id)
- Windows (daily posting windows, seeded with Matin and Soir)
- Moments (one per user per day, optional image)
- Reactions (text or short voice clips)
- Friendships (pending/accepted, one row per ordered pair)
- Invitations (single-use 8-character friend codes)

Revision ID: 3f1c9a2d7b40
Revises:
Create Date: 2026-10-12 09:14:52.318402

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str, nullable: bool = False) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=nullable,
        server_default=None if nullable else sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("display_name", sa.String(50), nullable=False),
        sa.Column(
            "avatar_color", sa.String(20), nullable=False, server_default="blue"
        ),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # WINDOWS table
    # ========================================================================
    op.create_table(
        "windows",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("label", sa.String(50), nullable=False),
        sa.Column("start_hour", sa.Integer(), nullable=False),
        sa.Column("end_hour", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "start_hour BETWEEN 0 AND 23", name="check_window_start_hour"
        ),
        sa.CheckConstraint("end_hour BETWEEN 0 AND 23", name="check_window_end_hour"),
    )

    # ========================================================================
    # MOMENTS table
    # ========================================================================
    op.create_table(
        "moments",
        _uuid_pk(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("image_path", sa.Text(), nullable=True),
        sa.Column("description", sa.String(280), nullable=True),
        _timestamp("captured_at"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_moments_author_captured", "moments", ["author_id", "captured_at"]
    )
    op.create_index("idx_moments_captured_at", "moments", ["captured_at"])

    # ========================================================================
    # REACTIONS table
    # ========================================================================
    op.create_table(
        "reactions",
        _uuid_pk(),
        sa.Column("moment_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("kind", sa.String(10), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("audio_path", sa.Text(), nullable=True),
        sa.Column("duration", sa.Float(), nullable=True),
        sa.Column("waveform", postgresql.JSONB(), nullable=True),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["moment_id"], ["moments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("kind IN ('text', 'voice')", name="check_reaction_kind"),
        sa.CheckConstraint(
            "(kind = 'text' AND content IS NOT NULL) "
            "OR (kind = 'voice' AND audio_path IS NOT NULL)",
            name="check_reaction_payload",
        ),
    )
    op.create_index(
        "idx_reactions_moment_created", "reactions", ["moment_id", "created_at"]
    )

    # ========================================================================
    # FRIENDSHIPS table
    # ========================================================================
    op.create_table(
        "friendships",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("friend_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        _timestamp("created_at"),
        sa.ForeignKeyConstraint(["user_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["friend_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "friend_id", name="uq_friendship_pair"),
        sa.CheckConstraint("user_id <> friend_id", name="check_no_self_friendship"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted')", name="check_friendship_status"
        ),
    )
    op.create_index("idx_friendships_user_id", "friendships", ["user_id"])
    op.create_index("idx_friendships_friend_id", "friendships", ["friend_id"])

    # ========================================================================
    # INVITATIONS table
    # ========================================================================
    op.create_table(
        "invitations",
        _uuid_pk(),
        sa.Column("creator_id", sa.UUID(), nullable=False),
        sa.Column("code", sa.String(8), nullable=False),
        sa.Column("is_used", sa.Boolean(), nullable=False, server_default="false"),
        _timestamp("expires_at", nullable=True),
        _timestamp("created_at"),
        sa.Column("used_by", sa.UUID(), nullable=True),
        _timestamp("used_at", nullable=True),
        sa.ForeignKeyConstraint(["creator_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["used_by"], ["profiles.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code", name="invitations_code_key"),
    )
    op.create_index(
        "idx_invitations_creator_active", "invitations", ["creator_id", "is_used"]
    )

    # Default windows
    op.execute("""
        INSERT INTO windows (label, start_hour, end_hour) VALUES
            ('Matin', 8, 9),
            ('Soir', 19, 20)
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_invitations_creator_active", table_name="invitations")
    op.drop_table("invitations")
    op.drop_index("idx_friendships_friend_id", table_name="friendships")
    op.drop_index("idx_friendships_user_id", table_name="friendships")
    op.drop_table("friendships")
    op.drop_index("idx_reactions_moment_created", table_name="reactions")
    op.drop_table("reactions")
    op.drop_index("idx_moments_captured_at", table_name="moments")
    op.drop_index("idx_moments_author_captured", table_name="moments")
    op.drop_table("moments")
    op.drop_table("windows")
    op.drop_table("profiles")
