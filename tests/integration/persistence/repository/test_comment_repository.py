"""Integration tests for the PostgreSQL repositories.

These tests need a migrated PostgreSQL database reachable through
DATABASE__URL (run scripts/run_migrations.py first).
"""

import os
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from discuss.domain.error import ConcurrentModificationError, NotFoundError
from discuss.domain.model import Comment, Notification
from discuss.domain.repository import CommentRepository, NotificationRepository
from discuss.domain.value import CommentId, DisplayName, NotificationId, UserId
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="PostgreSQL not configured"
)

# Integration test fixture - real persistence, frozen clock
integration_env = create_env_fixture(unmock={"persistence"})


def _comment(parent: Comment | None = None, minutes: int = 0) -> Comment:
    created = datetime.now(timezone.utc) + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        content="Integration comment",
        author_id=UserId(uuid4()),
        author_name=DisplayName("Alice"),
        parent_id=parent.id if parent else None,
        depth=parent.depth + 1 if parent else 0,
        created_at=created,
        updated_at=created,
    )


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_insert_and_find(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        comment = await repo.insert(_comment())

        found = await repo.find_by_id(comment.id)

        assert found is not None
        assert found.id == comment.id
        assert str(found.author_name) == "Alice"
        assert found.version == 1

    @pytest.mark.asyncio
    async def test_compare_and_write(self, integration_env):
        """A stale version is refused and the first write is kept."""
        # Arrange
        repo = await integration_env.get(CommentRepository)
        comment = await repo.insert(_comment())

        # Act
        updated = await repo.update(
            comment.id, {"content": "First", "is_edited": True}, expected_version=1
        )

        # Assert
        assert updated.version == 2
        with pytest.raises(ConcurrentModificationError):
            await repo.update(comment.id, {"content": "Second"}, expected_version=1)
        assert (await repo.find_by_id(comment.id)).content == "First"

    @pytest.mark.asyncio
    async def test_update_missing(self, integration_env):
        repo = await integration_env.get(CommentRepository)

        with pytest.raises(NotFoundError):
            await repo.update(CommentId(uuid4()), {"content": "x"}, expected_version=1)

    @pytest.mark.asyncio
    async def test_children_oldest_first(self, integration_env):
        repo = await integration_env.get(CommentRepository)
        root = await repo.insert(_comment())
        late = await repo.insert(_comment(root, minutes=2))
        early = await repo.insert(_comment(root, minutes=1))

        children = await repo.find_children(root.id)

        assert [c.id for c in children] == [early.id, late.id]


class TestPostgresNotificationRepository:
    """Integration tests for PostgresNotificationRepository."""

    @pytest.mark.asyncio
    async def test_insert_count_and_mark(self, integration_env):
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        notification_repo = await integration_env.get(NotificationRepository)
        source = await comment_repo.insert(_comment())
        recipient = UserId(uuid4())
        notification = await notification_repo.insert(
            Notification(
                id=NotificationId(uuid4()),
                message="Bob replied to your comment",
                recipient_id=recipient,
                source_comment_id=source.id,
                created_at=datetime.now(timezone.utc),
            )
        )

        # Act / Assert
        assert await notification_repo.count_unread(recipient) == 1
        items, total = await notification_repo.find_by_recipient(
            recipient, offset=0, limit=10
        )
        assert total == 1
        assert items[0].id == notification.id

        marked = await notification_repo.mark_read(notification.id, recipient)
        assert marked is not None and marked.is_read
        assert await notification_repo.count_unread(recipient) == 0
