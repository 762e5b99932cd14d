"""Notification domain service."""

import logfire
from datetime import datetime
from uuid import uuid4

from discuss.domain.error import ForbiddenError, NotFoundError
from discuss.domain.model import Comment, Notification
from discuss.domain.repository import NotificationRepository
from discuss.domain.value import Actor, NotificationId, NotificationType, UserId

from .base import Service
from .clock import Clock
from .pagination import Page, page_offset


class NotificationService(Service):
    """Domain service for notification operations."""

    def __init__(
        self, notification_repository: NotificationRepository, clock: Clock
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            clock: Source of creation timestamps
        """
        self.notification_repository = notification_repository
        self.clock = clock

    async def notify_reply(
        self,
        parent: Comment,
        reply: Comment,
        actor: Actor,
        now: datetime | None = None,
    ) -> Notification:
        """Tell the parent's author that someone replied.

        Args:
            parent: The comment that was replied to
            reply: The newly created reply
            actor: Identity that wrote the reply
            now: Instant of the reply (read from the clock when omitted)

        Returns:
            The stored notification
        """
        with logfire.span(
            "notification_service.notify_reply",
            recipient_id=str(parent.author_id),
            source_comment_id=str(reply.id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                type=NotificationType.COMMENT_REPLY,
                message=f"{actor.display_name} replied to your comment",
                recipient_id=parent.author_id,
                source_comment_id=reply.id,
                is_read=False,
                created_at=now or self.clock.now(),
            )
            saved = await self.notification_repository.insert(notification)
            logfire.info(
                "Reply notification created",
                notification_id=str(saved.id),
                recipient_id=str(saved.recipient_id),
            )
            return saved

    async def list_for_user(
        self, user_id: UserId, page: int = 1, limit: int = 10
    ) -> Page[Notification]:
        """List a user's notifications, newest first.

        Args:
            user_id: Recipient
            page: 1-based page number
            limit: Page size

        Returns:
            The requested page with totals

        Raises:
            ValidationError: If page or limit is out of range
        """
        with logfire.span(
            "notification_service.list_for_user",
            user_id=str(user_id),
            page=page,
            limit=limit,
        ):
            offset = page_offset(page, limit)
            items, total = await self.notification_repository.find_by_recipient(
                user_id, offset=offset, limit=limit
            )
            logfire.info(
                "Notifications listed",
                user_id=str(user_id),
                count=len(items),
                total=total,
            )
            return Page(items=items, total=total, page=page, limit=limit)

    async def unread_count(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        with logfire.span("notification_service.unread_count", user_id=str(user_id)):
            return await self.notification_repository.count_unread(user_id)

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification:
        """Mark one notification as read.

        Marking an already-read notification succeeds and changes nothing.

        Args:
            notification_id: Notification to mark
            user_id: User asking, must be the recipient

        Returns:
            The notification in its read state

        Raises:
            NotFoundError: If the notification does not exist
            ForbiddenError: If it belongs to another user
        """
        with logfire.span(
            "notification_service.mark_read",
            notification_id=str(notification_id),
            user_id=str(user_id),
        ):
            existing = await self.notification_repository.find_by_id(notification_id)
            if existing is None:
                logfire.warn(
                    "Notification not found", notification_id=str(notification_id)
                )
                raise NotFoundError("Notification", str(notification_id))
            if existing.recipient_id != user_id:
                logfire.warn(
                    "Notification belongs to another user",
                    notification_id=str(notification_id),
                    user_id=str(user_id),
                )
                raise ForbiddenError(
                    "notification", str(notification_id), str(user_id), "read"
                )

            updated = await self.notification_repository.mark_read(
                notification_id, user_id
            )
            if updated is None:
                raise NotFoundError("Notification", str(notification_id))

            logfire.info("Notification marked read", notification_id=str(updated.id))
            return updated

    async def mark_all_read(self, user_id: UserId) -> None:
        """Mark every notification of the user as read. Idempotent."""
        with logfire.span("notification_service.mark_all_read", user_id=str(user_id)):
            await self.notification_repository.mark_all_read(user_id)
            logfire.info("All notifications marked read", user_id=str(user_id))
