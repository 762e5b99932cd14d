"""Domain model entities for discussions."""

from discuss.domain.model.comment import Comment
from discuss.domain.model.notification import Notification

__all__ = [
    "Comment",
    "Notification",
]
