"""Repository interfaces for the discussion domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from discuss.domain.repository.comment import CommentRepository
from discuss.domain.repository.notification import NotificationRepository

__all__ = [
    "CommentRepository",
    "NotificationRepository",
]
