"""Notification use cases."""

from .get_unread_count import GetUnreadCountUseCase, UnreadCountResponse
from .list_notifications import (
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
)
from .mark_read import MarkAllReadUseCase, MarkReadRequest, MarkReadUseCase
from .response import NotificationResponse

__all__ = [
    "GetUnreadCountUseCase",
    "ListNotificationsRequest",
    "ListNotificationsResponse",
    "ListNotificationsUseCase",
    "MarkAllReadUseCase",
    "MarkReadRequest",
    "MarkReadUseCase",
    "NotificationResponse",
    "UnreadCountResponse",
]
