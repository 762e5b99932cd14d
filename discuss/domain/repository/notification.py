"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from discuss.domain.model.notification import Notification
from discuss.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def insert(self, notification: Notification) -> Notification:
        """Persist a new notification."""
        pass

    @abstractmethod
    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        pass

    @abstractmethod
    async def find_by_recipient(
        self, user_id: UserId, offset: int, limit: int
    ) -> tuple[list[Notification], int]:
        """Find a page of a user's notifications, newest first.

        Args:
            user_id: The recipient
            offset: Number of notifications to skip
            limit: Maximum number of notifications to return

        Returns:
            The page of notifications and the recipient's total count
        """
        pass

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        pass

    @abstractmethod
    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the user's notifications as read.

        Returns:
            The updated notification, or None if no notification with this ID
            belongs to the user
        """
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: UserId) -> None:
        """Mark every unread notification of the user as read."""
        pass
