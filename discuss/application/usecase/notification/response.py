"""Notification response model."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import Notification


class NotificationResponse(BaseModel):
    """A single notification as shown to its recipient."""

    notification_id: str
    type: str
    message: str
    source_comment_id: str
    is_read: bool
    created_at: datetime

    @classmethod
    def from_domain(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            notification_id=str(notification.id),
            type=notification.type.value,
            message=notification.message,
            source_comment_id=str(notification.source_comment_id),
            is_read=notification.is_read,
            created_at=notification.created_at,
        )
