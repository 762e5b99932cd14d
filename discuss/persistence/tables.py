"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ENUM, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("content", Text, nullable=False),
    Column("author_id", UUID(as_uuid=True), nullable=False),
    Column("author_name", String(255), nullable=False),  # Denormalized from identity
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="RESTRICT"),
        nullable=True,
    ),
    Column("depth", Integer, nullable=False, server_default="0"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
    Column("updated_at", TIMESTAMP(timezone=True), nullable=False),
    Column("version", Integer, nullable=False, server_default="1"),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint(
        "is_deleted = (deleted_at IS NOT NULL)", name="deleted_at_matches_flag"
    ),
)

Index(
    "idx_comments_parent_id_created_at",
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_author_id", comments_table.c.author_id)
# Root listing: WHERE parent_id IS NULL ORDER BY created_at DESC
Index(
    "idx_comments_roots_created_at",
    comments_table.c.created_at.desc(),
    postgresql_where=comments_table.c.parent_id.is_(None),
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "type",
        ENUM("comment_reply", name="notification_type", create_type=False),
        nullable=False,
        server_default="comment_reply",
    ),
    Column("message", String(500), nullable=False),
    Column("recipient_id", UUID(as_uuid=True), nullable=False),
    Column(
        "source_comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("created_at", TIMESTAMP(timezone=True), nullable=False),
)

Index(
    "idx_notifications_recipient_created_at",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
# Unread count: WHERE recipient_id = ? AND is_read = false
Index(
    "idx_notifications_recipient_unread",
    notifications_table.c.recipient_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)
