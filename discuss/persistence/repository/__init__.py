"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.notification import (
    PostgresNotificationRepository,
)

__all__ = [
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
]
