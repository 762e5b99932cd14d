"""Unit tests for notification use cases."""

from uuid import uuid4

import pytest

from discuss.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
)
from discuss.domain.error import ForbiddenError, NotFoundError, ValidationError
from discuss.domain.service import CommentService
from tests.conftest import make_actor
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestNotificationUseCases:
    """Tests for listing, counting and marking notifications."""

    @pytest.mark.asyncio
    async def test_reply_flow(self, unit_env):
        """List, mark one read, then mark all read."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        count_use_case = await unit_env.get(GetUnreadCountUseCase)
        mark_read = await unit_env.get(MarkReadUseCase)
        mark_all_read = await unit_env.get(MarkAllReadUseCase)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        root = await comment_service.create_comment("Root", alice)
        reply = await comment_service.create_comment(
            "Reply", bob, parent_id=root.comment.id
        )
        await comment_service.create_comment("Again", bob, parent_id=root.comment.id)

        # Act
        listing = await list_use_case.execute(ListNotificationsRequest(actor=alice))

        # Assert
        assert listing.total == 2
        assert (await count_use_case.execute(alice)).count == 2
        oldest = listing.notifications[-1]
        assert oldest.type == "comment_reply"
        assert oldest.message == "Bob replied to your comment"
        assert oldest.source_comment_id == str(reply.comment.id)

        marked = await mark_read.execute(
            MarkReadRequest(notification_id=oldest.notification_id, actor=alice)
        )
        assert marked.is_read is True
        assert (await count_use_case.execute(alice)).count == 1

        await mark_all_read.execute(alice)
        assert (await count_use_case.execute(alice)).count == 0

    @pytest.mark.asyncio
    async def test_mark_read_errors(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        list_use_case = await unit_env.get(ListNotificationsUseCase)
        mark_read = await unit_env.get(MarkReadUseCase)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        root = await comment_service.create_comment("Root", alice)
        await comment_service.create_comment("Reply", bob, parent_id=root.comment.id)
        (notification,) = (
            await list_use_case.execute(ListNotificationsRequest(actor=alice))
        ).notifications

        with pytest.raises(ValidationError):
            await mark_read.execute(
                MarkReadRequest(notification_id="nope", actor=alice)
            )
        with pytest.raises(NotFoundError):
            await mark_read.execute(
                MarkReadRequest(notification_id=str(uuid4()), actor=alice)
            )
        with pytest.raises(ForbiddenError):
            await mark_read.execute(
                MarkReadRequest(
                    notification_id=notification.notification_id, actor=bob
                )
            )
