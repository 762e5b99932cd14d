"""Notification entity."""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, NotificationId, NotificationType, UserId


class Notification(DomainModel):
    """A durable, pollable record telling a user something happened.

    The message is rendered once at creation so later display-name changes
    do not rewrite history. ``is_read`` only ever moves from False to True.
    """

    id: NotificationId
    type: NotificationType = NotificationType.COMMENT_REPLY
    message: str = Field(min_length=1, max_length=500)
    recipient_id: UserId
    source_comment_id: CommentId
    is_read: bool = False
    created_at: datetime
