"""PostgreSQL implementation of Notification repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Notification
from discuss.domain.repository import NotificationRepository
from discuss.domain.value import NotificationId, UserId
from discuss.persistence.mappers import notification_to_dict, row_to_notification
from discuss.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, notification: Notification) -> Notification:
        """Insert a notification inside a SAVEPOINT.

        A failed insert only rolls back the savepoint, leaving earlier writes
        in the same transaction (the reply comment) intact.
        """
        async with self.session.begin_nested():
            stmt = notifications_table.insert().values(
                **notification_to_dict(notification)
            )
            await self.session.execute(stmt)
        return notification

    async def find_by_id(
        self, notification_id: NotificationId
    ) -> Optional[Notification]:
        """Find a notification by ID."""
        stmt = select(notifications_table).where(
            notifications_table.c.id == notification_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_notification(row._asdict()) if row else None

    async def find_by_recipient(
        self, user_id: UserId, offset: int, limit: int
    ) -> tuple[List[Notification], int]:
        """Find a page of a user's notifications, newest first."""
        for_user = notifications_table.c.recipient_id == user_id

        count_stmt = (
            select(func.count()).select_from(notifications_table).where(for_user)
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(notifications_table)
            .where(for_user)
            .order_by(
                desc(notifications_table.c.created_at), desc(notifications_table.c.id)
            )
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()], total

    async def count_unread(self, user_id: UserId) -> int:
        """Count a user's unread notifications."""
        stmt = (
            select(func.count())
            .select_from(notifications_table)
            .where(notifications_table.c.recipient_id == user_id)
            .where(notifications_table.c.is_read.is_(False))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def mark_read(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Optional[Notification]:
        """Mark one of the user's notifications as read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.id == notification_id)
            .where(notifications_table.c.recipient_id == user_id)
            .values(is_read=True)
            .returning(notifications_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_notification(row._asdict())

    async def mark_all_read(self, user_id: UserId) -> None:
        """Mark every unread notification of the user as read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.recipient_id == user_id)
            .where(notifications_table.c.is_read.is_(False))
            .values(is_read=True)
        )
        await self.session.execute(stmt)
        await self.session.flush()
