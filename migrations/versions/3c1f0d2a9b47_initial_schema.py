"""initial_schema

Create the schema for threaded discussions:
- Comments (threaded with unlimited depth, soft delete, optimistic version)
- Notifications (reply notifications, pollable)

Revision ID: 3c1f0d2a9b47
Revises:
Create Date: 2025-11-03 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0d2a9b47"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE notification_type AS ENUM ('comment_reply');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("parent_id", sa.UUID(), nullable=True),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("deleted_at", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        # Soft delete only: a parent row is never removed under its replies
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
        sa.CheckConstraint(
            "is_deleted = (deleted_at IS NOT NULL)", name="deleted_at_matches_flag"
        ),
    )

    op.create_index(
        "idx_comments_parent_id_created_at", "comments", ["parent_id", "created_at"]
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])
    op.execute(
        "CREATE INDEX idx_comments_roots_created_at ON comments (created_at DESC) "
        "WHERE parent_id IS NULL"
    )

    # ========================================================================
    # NOTIFICATIONS table
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column(
            "type",
            postgresql.ENUM("comment_reply", name="notification_type", create_type=False),
            nullable=False,
            server_default="comment_reply",
        ),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("recipient_id", sa.UUID(), nullable=False),
        sa.Column("source_comment_id", sa.UUID(), nullable=False),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["source_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.execute(
        "CREATE INDEX idx_notifications_recipient_created_at "
        "ON notifications (recipient_id, created_at DESC)"
    )
    op.execute(
        "CREATE INDEX idx_notifications_recipient_unread "
        "ON notifications (recipient_id) WHERE is_read = false"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("comments")
    op.execute("DROP TYPE IF EXISTS notification_type")
