"""initial_schema

Create the DevSocial schema:
- Users (username, API key, sharing preferences, avatar)
- Daily and hourly activity aggregates (JSONB project/language maps)
- Friendships (both directions stored) and friend requests
- Achievement unlocks
- Chat messages

Revision ID: 3c1d2e9f4a70
Revises:
Create Date: 2026-10-17 09:12:44.318201

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1d2e9f4a70"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Enable required extensions
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("credential_hash", sa.Text(), nullable=False),
        sa.Column("api_key", sa.String(128), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("avatar_id", sa.String(64), nullable=True),
        sa.Column(
            "share_activity", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column(
            "share_project_name", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column(
            "share_language", sa.Boolean(), nullable=False, server_default="true"
        ),
        sa.Column("auto_post", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("post_threshold", sa.Integer(), nullable=False, server_default="2"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("api_key", name="uq_users_api_key"),
        sa.CheckConstraint(
            "post_threshold BETWEEN 1 AND 24", name="ck_users_post_threshold"
        ),
    )
    op.execute("CREATE UNIQUE INDEX uq_users_username_lower ON users (lower(username))")

    # ========================================================================
    # DAILY_ACTIVITIES table
    # ========================================================================
    op.create_table(
        "daily_activities",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("total_seconds", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column(
            "projects",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "languages",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("last_update", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "date", name="pk_daily_activities"),
        sa.CheckConstraint("total_seconds >= 0", name="ck_daily_activities_total"),
    )

    # ========================================================================
    # HOURLY_ACTIVITIES table
    # ========================================================================
    op.create_table(
        "hourly_activities",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("hour", sa.Integer(), nullable=False),
        sa.Column("total_seconds", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column(
            "projects",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column(
            "languages",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("last_update", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "user_id", "date", "hour", name="pk_hourly_activities"
        ),
        sa.CheckConstraint("hour BETWEEN 0 AND 23", name="ck_hourly_activities_hour"),
        sa.CheckConstraint("total_seconds >= 0", name="ck_hourly_activities_total"),
    )
    op.create_index(
        "idx_hourly_activities_user_hour", "hourly_activities", ["user_id", "hour"]
    )

    # ========================================================================
    # FRIENDSHIPS table
    # ========================================================================
    op.create_table(
        "friendships",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("friend_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["friend_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "friend_id", name="pk_friendships"),
        sa.CheckConstraint("user_id <> friend_id", name="ck_friendships_not_self"),
    )

    # ========================================================================
    # FRIEND_REQUESTS table
    # ========================================================================
    op.create_table(
        "friend_requests",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("from_user_id", sa.UUID(), nullable=False),
        sa.Column("to_user_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("responded_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["from_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["to_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected')",
            name="ck_friend_requests_status",
        ),
        sa.CheckConstraint(
            "from_user_id <> to_user_id", name="ck_friend_requests_not_self"
        ),
    )
    op.create_index("idx_friend_requests_to", "friend_requests", ["to_user_id"])
    op.create_index("idx_friend_requests_from", "friend_requests", ["from_user_id"])
    # At most one pending request per unordered pair of users
    op.execute("""
        CREATE UNIQUE INDEX uq_friend_requests_pending_pair
        ON friend_requests (
            LEAST(from_user_id, to_user_id),
            GREATEST(from_user_id, to_user_id)
        )
        WHERE status = 'pending'
    """)

    # ========================================================================
    # ACHIEVEMENT_UNLOCKS table
    # ========================================================================
    op.create_table(
        "achievement_unlocks",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("achievement_id", sa.String(64), nullable=False),
        sa.Column(
            "unlocked_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "user_id", "achievement_id", name="pk_achievement_unlocks"
        ),
    )

    # ========================================================================
    # CHAT_MESSAGES table
    # ========================================================================
    op.create_table(
        "chat_messages",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("from_user_id", sa.UUID(), nullable=False),
        sa.Column("to_user_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("read_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["from_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["to_user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_chat_messages_conversation",
        "chat_messages",
        ["from_user_id", "to_user_id", "created_at"],
    )
    op.create_index(
        "idx_chat_messages_unread",
        "chat_messages",
        ["to_user_id"],
        postgresql_where=sa.text("read_at IS NULL"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("chat_messages")
    op.drop_table("achievement_unlocks")
    op.execute("DROP INDEX IF EXISTS uq_friend_requests_pending_pair")
    op.drop_table("friend_requests")
    op.drop_table("friendships")
    op.drop_table("hourly_activities")
    op.drop_table("daily_activities")
    op.execute("DROP INDEX IF EXISTS uq_users_username_lower")
    op.drop_table("users")
