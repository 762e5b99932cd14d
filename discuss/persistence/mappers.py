"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through an ORM.
"""

from typing import Any, Dict
from uuid import UUID

from discuss.domain.model import Comment, Notification
from discuss.domain.value import (
    CommentId,
    DisplayName,
    NotificationId,
    NotificationType,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        author_id=UserId(_uuid(row["author_id"])),
        author_name=DisplayName(row["author_name"]),
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        depth=row["depth"],
        is_deleted=row["is_deleted"],
        deleted_at=row.get("deleted_at"),
        is_edited=row["is_edited"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        version=row["version"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        type=NotificationType(row["type"]),
        message=row["message"],
        recipient_id=UserId(_uuid(row["recipient_id"])),
        source_comment_id=CommentId(_uuid(row["source_comment_id"])),
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    The enum is stored by value.
    """
    return notification.model_dump(mode="python") | {"type": notification.type.value}
