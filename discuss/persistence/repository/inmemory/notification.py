"""In-memory notification repository for testing."""

from itertools import count
from typing import Optional

from discuss.domain.model.notification import Notification
from discuss.domain.repository.notification import NotificationRepository
from discuss.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}
        self._sequence: dict[NotificationId, int] = {}
        self._counter = count()

    async def insert(self, notification: Notification) -> Notification:
        """Insert a notification."""
        self._notifications[notification.id] = notification
        self._sequence[notification.id] = next(self._counter)
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        return self._notifications.get(notification_id)

    async def find_by_recipient(
        self, user_id: UserId, offset: int, limit: int
    ) -> tuple[list[Notification], int]:
        """Find a page of a user's notifications, newest first."""
        mine = [n for n in self._notifications.values() if n.recipient_id == user_id]
        mine.sort(key=lambda n: (n.created_at, self._sequence[n.id]), reverse=True)
        return mine[offset : offset + limit], len(mine)

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        return sum(
            1
            for n in self._notifications.values()
            if n.recipient_id == user_id and not n.is_read
        )

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the user's notifications as read."""
        notification = self._notifications.get(notification_id)
        if notification is None or notification.recipient_id != user_id:
            return None
        updated = notification.model_copy(update={"is_read": True})
        self._notifications[notification_id] = updated
        return updated

    async def mark_all_read(self, user_id: UserId) -> None:
        """Mark every unread notification of the user as read."""
        for notification_id, notification in list(self._notifications.items()):
            if notification.recipient_id == user_id and not notification.is_read:
                self._notifications[notification_id] = notification.model_copy(
                    update={"is_read": True}
                )
