"""Domain value objects for discussions."""

from discuss.domain.value.identifiers import CommentId, NotificationId, UserId
from discuss.domain.value.types import Actor, DisplayName, NotificationType

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "NotificationId",
    # Types
    "Actor",
    "DisplayName",
    "NotificationType",
]
