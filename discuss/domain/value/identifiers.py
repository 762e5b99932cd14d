"""Strongly typed identifiers for discussion entities.

NewType keeps comment, notification and user IDs from being mixed up while
staying plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)
NotificationId = NewType("NotificationId", UUID)
