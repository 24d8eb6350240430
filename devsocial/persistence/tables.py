"""SQLAlchemy table definitions for DevSocial.

These table definitions are used with SQLAlchemy Core and the manual
mappers in `devsocial.persistence.mappers`. They match the schema defined
in the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column("username", String(50), nullable=False),
    Column("credential_hash", Text, nullable=False),
    Column("api_key", String(128), nullable=False, unique=True),
    Column("email", String(255), nullable=True),
    Column("avatar_id", String(64), nullable=True),
    # Sharing preferences
    Column("share_activity", Boolean, nullable=False, server_default="true"),
    Column("share_project_name", Boolean, nullable=False, server_default="true"),
    Column("share_language", Boolean, nullable=False, server_default="true"),
    Column("auto_post", Boolean, nullable=False, server_default="false"),
    Column("post_threshold", Integer, nullable=False, server_default="2"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "post_threshold BETWEEN 1 AND 24", name="ck_users_post_threshold"
    ),
)

# Usernames are unique case-insensitively
Index("uq_users_username_lower", func.lower(users_table.c.username), unique=True)

# ============================================================================
# DAILY ACTIVITIES TABLE (one row per user per UTC day)
# ============================================================================
daily_activities_table = Table(
    "daily_activities",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("date", Date, nullable=False),
    Column("total_seconds", BigInteger, nullable=False, server_default="0"),
    Column("projects", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("languages", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("last_update", TIMESTAMP(timezone=True), nullable=False),
    PrimaryKeyConstraint("user_id", "date", name="pk_daily_activities"),
    CheckConstraint("total_seconds >= 0", name="ck_daily_activities_total"),
)

# ============================================================================
# HOURLY ACTIVITIES TABLE (one row per user per UTC day and hour)
# ============================================================================
hourly_activities_table = Table(
    "hourly_activities",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("date", Date, nullable=False),
    Column("hour", Integer, nullable=False),
    Column("total_seconds", BigInteger, nullable=False, server_default="0"),
    Column("projects", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("languages", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("last_update", TIMESTAMP(timezone=True), nullable=False),
    PrimaryKeyConstraint("user_id", "date", "hour", name="pk_hourly_activities"),
    CheckConstraint("hour BETWEEN 0 AND 23", name="ck_hourly_activities_hour"),
    CheckConstraint("total_seconds >= 0", name="ck_hourly_activities_total"),
)

Index(
    "idx_hourly_activities_user_hour",
    hourly_activities_table.c.user_id,
    hourly_activities_table.c.hour,
)

# ============================================================================
# FRIENDSHIPS TABLE (both directions stored)
# ============================================================================
friendships_table = Table(
    "friendships",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "friend_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "friend_id", name="pk_friendships"),
    CheckConstraint("user_id <> friend_id", name="ck_friendships_not_self"),
)

# ============================================================================
# FRIEND REQUESTS TABLE
# ============================================================================
friend_requests_table = Table(
    "friend_requests",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column(
        "from_user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "to_user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("status", String(16), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("responded_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint(
        "status IN ('pending', 'accepted', 'rejected')",
        name="ck_friend_requests_status",
    ),
    CheckConstraint("from_user_id <> to_user_id", name="ck_friend_requests_not_self"),
)

Index("idx_friend_requests_to", friend_requests_table.c.to_user_id)
Index("idx_friend_requests_from", friend_requests_table.c.from_user_id)

# At most one pending request per unordered pair
Index(
    "uq_friend_requests_pending_pair",
    func.least(friend_requests_table.c.from_user_id, friend_requests_table.c.to_user_id),
    func.greatest(
        friend_requests_table.c.from_user_id, friend_requests_table.c.to_user_id
    ),
    unique=True,
    postgresql_where=friend_requests_table.c.status == "pending",
)

# ============================================================================
# ACHIEVEMENT UNLOCKS TABLE
# ============================================================================
achievement_unlocks_table = Table(
    "achievement_unlocks",
    metadata,
    Column(
        "user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("achievement_id", String(64), nullable=False),
    Column(
        "unlocked_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("user_id", "achievement_id", name="pk_achievement_unlocks"),
)

# ============================================================================
# CHAT MESSAGES TABLE
# ============================================================================
chat_messages_table = Table(
    "chat_messages",
    metadata,
    Column("id", UUID, primary_key=True, server_default=text("uuid_generate_v4()")),
    Column(
        "from_user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "to_user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("read_at", TIMESTAMP(timezone=True), nullable=True),
)

Index(
    "idx_chat_messages_conversation",
    chat_messages_table.c.from_user_id,
    chat_messages_table.c.to_user_id,
    chat_messages_table.c.created_at,
)
Index(
    "idx_chat_messages_unread",
    chat_messages_table.c.to_user_id,
    postgresql_where=chat_messages_table.c.read_at.is_(None),
)
