"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from discuss.domain.error import (
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.repository import CommentRepository, NotificationRepository
from discuss.domain.service import Clock, CommentService
from discuss.domain.value import CommentId
from tests.conftest import make_actor
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env):
        """Root comment has depth 0, no parent and fresh flags."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")

        # Act
        node = await comment_service.create_comment("Hello world", alice)

        # Assert
        comment = node.comment
        assert comment.content == "Hello world"
        assert comment.author_id == alice.id
        assert str(comment.author_name) == "Alice"
        assert comment.parent_id is None
        assert comment.depth == 0
        assert comment.is_deleted is False
        assert comment.deleted_at is None
        assert comment.is_edited is False
        assert comment.created_at == clock.now()
        assert comment.updated_at == clock.now()
        assert node.can_edit is True
        assert node.can_restore is False
        assert node.can_delete is True
        assert node.replies == []

        saved = await comment_repo.find_by_id(comment.id)
        assert saved == comment

    @pytest.mark.asyncio
    async def test_reply_increments_depth(self, unit_env):
        """A reply sits one level below its parent."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        root = await comment_service.create_comment("Root", alice)
        child = await comment_service.create_comment(
            "Child", alice, parent_id=root.comment.id
        )

        # Act
        grandchild = await comment_service.create_comment(
            "Grandchild", alice, parent_id=child.comment.id
        )

        # Assert
        assert child.comment.depth == 1
        assert grandchild.comment.depth == 2
        assert grandchild.comment.parent_id == child.comment.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_rejected(self, unit_env, content):
        """Empty or whitespace-only content fails validation."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(content, make_actor())

    @pytest.mark.asyncio
    async def test_overlong_content_rejected(self, unit_env):
        """Content beyond the configured maximum fails validation."""
        comment_service = await unit_env.get(CommentService)
        too_long = "x" * (comment_service.settings.max_length + 1)

        with pytest.raises(ValidationError):
            await comment_service.create_comment(too_long, make_actor())

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_fails(self, unit_env):
        """Replying to an unknown comment raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.create_comment(
                "Reply", make_actor(), parent_id=CommentId(uuid4())
            )

    @pytest.mark.asyncio
    async def test_reply_to_deleted_parent_fails(self, unit_env):
        """Replying to a soft-deleted comment raises InvalidStateError."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        root = await comment_service.create_comment("Root", alice)
        await comment_service.delete_comment(root.comment.id, alice)

        # Act / Assert
        with pytest.raises(InvalidStateError):
            await comment_service.create_comment(
                "Reply", bob, parent_id=root.comment.id
            )
        assert await notification_repo.count_unread(alice.id) == 0


class TestReplyNotifications:
    """Tests for the reply notification side effect."""

    @pytest.mark.asyncio
    async def test_reply_by_other_user_notifies_parent_author(self, unit_env):
        """B replying to A creates exactly one notification for A."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        root = await comment_service.create_comment("Root", alice)

        # Act
        reply = await comment_service.create_comment(
            "Reply", bob, parent_id=root.comment.id
        )

        # Assert
        notifications, total = await notification_repo.find_by_recipient(
            alice.id, offset=0, limit=10
        )
        assert total == 1
        notification = notifications[0]
        assert notification.message == "Bob replied to your comment"
        assert notification.source_comment_id == reply.comment.id
        assert notification.is_read is False
        assert await notification_repo.count_unread(bob.id) == 0

    @pytest.mark.asyncio
    async def test_self_reply_does_not_notify(self, unit_env):
        """Replying to your own comment creates no notification."""
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = make_actor("Alice")
        root = await comment_service.create_comment("Root", alice)

        await comment_service.create_comment("Me again", alice, parent_id=root.comment.id)

        assert await notification_repo.count_unread(alice.id) == 0

    @pytest.mark.asyncio
    async def test_root_comment_does_not_notify(self, unit_env):
        """A root comment has nobody to notify."""
        comment_service = await unit_env.get(CommentService)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = make_actor("Alice")

        await comment_service.create_comment("Root", alice)

        assert await notification_repo.count_unread(alice.id) == 0

    @pytest.mark.asyncio
    async def test_notification_failure_keeps_reply(self, unit_env, monkeypatch):
        """A failing notification write is logged and the reply survives."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        root = await comment_service.create_comment("Root", alice)

        async def broken_insert(notification):
            raise RuntimeError("notification store unavailable")

        monkeypatch.setattr(notification_repo, "insert", broken_insert)

        # Act
        reply = await comment_service.create_comment(
            "Reply", bob, parent_id=root.comment.id
        )

        # Assert
        assert await comment_repo.find_by_id(reply.comment.id) is not None
        assert await notification_repo.count_unread(alice.id) == 0


class TestEditComment:
    """Tests for edit_comment method."""

    @pytest.mark.asyncio
    async def test_edit_within_window(self, unit_env):
        """Editing at 14 minutes replaces content and keeps created_at."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        clock.advance(minutes=14)

        # Act
        edited = await comment_service.edit_comment(
            created.comment.id, "Revised", alice
        )

        # Assert
        assert edited.comment.content == "Revised"
        assert edited.comment.is_edited is True
        assert edited.comment.created_at == created.comment.created_at
        assert edited.comment.updated_at == clock.now()
        assert edited.comment.parent_id == created.comment.parent_id

        fetched = await comment_service.get_comment(created.comment.id)
        assert fetched.comment.content == "Revised"
        assert fetched.comment.is_edited is True

    @pytest.mark.asyncio
    async def test_edit_after_window_fails(self, unit_env):
        """Editing at 16 minutes is rejected."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        clock.advance(minutes=16)

        with pytest.raises(InvalidStateError, match="Edit window has expired"):
            await comment_service.edit_comment(created.comment.id, "Too late", alice)

    @pytest.mark.asyncio
    async def test_edit_at_exact_window_boundary_fails(self, unit_env):
        """The edit window is exclusive at 15 minutes."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        clock.advance(minutes=15)

        with pytest.raises(InvalidStateError):
            await comment_service.edit_comment(created.comment.id, "Too late", alice)

    @pytest.mark.asyncio
    async def test_edit_by_other_user_forbidden(self, unit_env):
        """Only the author may edit."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)

        with pytest.raises(ForbiddenError):
            await comment_service.edit_comment(
                created.comment.id, "Hijack", make_actor("Mallory")
            )

    @pytest.mark.asyncio
    async def test_edit_deleted_comment_fails(self, unit_env):
        """A deleted comment cannot be edited, even inside the window."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        await comment_service.delete_comment(created.comment.id, alice)

        with pytest.raises(InvalidStateError):
            await comment_service.edit_comment(created.comment.id, "Revised", alice)

    @pytest.mark.asyncio
    async def test_edit_missing_comment(self, unit_env):
        """Editing an unknown comment raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(
                CommentId(uuid4()), "Revised", make_actor()
            )

    @pytest.mark.asyncio
    async def test_edit_with_blank_content_fails(self, unit_env):
        """Blank replacement content fails validation."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)

        with pytest.raises(ValidationError):
            await comment_service.edit_comment(created.comment.id, "  ", alice)

    @pytest.mark.asyncio
    async def test_edit_checks_ownership_before_content(self, unit_env):
        """Existence and ownership are checked before the new content."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)

        with pytest.raises(ForbiddenError):
            await comment_service.edit_comment(
                created.comment.id, "  ", make_actor("Mallory")
            )
        with pytest.raises(NotFoundError):
            await comment_service.edit_comment(CommentId(uuid4()), "", alice)


class TestDeleteAndRestore:
    """Tests for delete_comment and restore_comment."""

    @pytest.mark.asyncio
    async def test_delete_sets_tombstone_fields(self, unit_env):
        """Soft delete sets is_deleted and deleted_at together."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        clock.advance(minutes=30)

        # Act
        deleted = await comment_service.delete_comment(created.comment.id, alice)

        # Assert
        assert deleted.comment.is_deleted is True
        assert deleted.comment.deleted_at == clock.now()
        assert deleted.comment.updated_at == clock.now()
        assert deleted.comment.content == "Original"
        assert deleted.can_edit is False
        assert deleted.can_restore is True

    @pytest.mark.asyncio
    async def test_delete_twice_fails(self, unit_env):
        """Deleting an already-deleted comment raises InvalidStateError."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        await comment_service.delete_comment(created.comment.id, alice)

        with pytest.raises(InvalidStateError):
            await comment_service.delete_comment(created.comment.id, alice)

    @pytest.mark.asyncio
    async def test_delete_by_other_user_forbidden(self, unit_env):
        """Only the author may delete."""
        comment_service = await unit_env.get(CommentService)
        created = await comment_service.create_comment("Original", make_actor())

        with pytest.raises(ForbiddenError):
            await comment_service.delete_comment(created.comment.id, make_actor())

    @pytest.mark.asyncio
    async def test_delete_keeps_replies(self, unit_env):
        """Deleting a parent leaves its replies in place."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        root = await comment_service.create_comment("Root", alice)
        reply = await comment_service.create_comment(
            "Reply", bob, parent_id=root.comment.id
        )

        deleted = await comment_service.delete_comment(root.comment.id, alice)

        assert [n.comment.id for n in deleted.replies] == [reply.comment.id]
        assert deleted.replies[0].comment.parent_id == root.comment.id

    @pytest.mark.asyncio
    async def test_restore_within_window(self, unit_env):
        """Restoring at 14 minutes clears the tombstone fields."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        await comment_service.delete_comment(created.comment.id, alice)
        clock.advance(minutes=14)

        # Act
        restored = await comment_service.restore_comment(created.comment.id, alice)

        # Assert
        assert restored.comment.is_deleted is False
        assert restored.comment.deleted_at is None
        assert restored.comment.updated_at == clock.now()
        assert restored.comment.parent_id is None
        assert restored.can_restore is False

    @pytest.mark.asyncio
    async def test_restore_after_window_fails(self, unit_env):
        """Restoring at 16 minutes is rejected."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        await comment_service.delete_comment(created.comment.id, alice)
        clock.advance(minutes=16)

        with pytest.raises(InvalidStateError, match="Restore window has expired"):
            await comment_service.restore_comment(created.comment.id, alice)

    @pytest.mark.asyncio
    async def test_restore_window_counts_from_deletion(self, unit_env):
        """The restore window starts at deletion, not creation."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        clock.advance(hours=2)
        await comment_service.delete_comment(created.comment.id, alice)
        clock.advance(minutes=10)

        restored = await comment_service.restore_comment(created.comment.id, alice)

        assert restored.comment.is_deleted is False

    @pytest.mark.asyncio
    async def test_restore_active_comment_fails(self, unit_env):
        """Restoring a comment that is not deleted raises InvalidStateError."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)

        with pytest.raises(InvalidStateError):
            await comment_service.restore_comment(created.comment.id, alice)

    @pytest.mark.asyncio
    async def test_restore_by_other_user_forbidden(self, unit_env):
        """Only the author may restore."""
        comment_service = await unit_env.get(CommentService)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        await comment_service.delete_comment(created.comment.id, alice)

        with pytest.raises(ForbiddenError):
            await comment_service.restore_comment(created.comment.id, make_actor())

    @pytest.mark.asyncio
    async def test_restored_comment_is_editable_inside_edit_window(self, unit_env):
        """Restore does not reset created_at, so the edit window still applies."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        created = await comment_service.create_comment("Original", alice)
        await comment_service.delete_comment(created.comment.id, alice)
        clock.advance(minutes=5)
        await comment_service.restore_comment(created.comment.id, alice)

        edited = await comment_service.edit_comment(created.comment.id, "Back", alice)

        assert edited.comment.content == "Back"


class TestListing:
    """Tests for read operations."""

    @pytest.mark.asyncio
    async def test_list_roots_newest_first_with_nested_replies(self, unit_env):
        """Roots come newest first; replies are nested oldest first."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        first = await comment_service.create_comment("First", alice)
        clock.advance(seconds=1)
        second = await comment_service.create_comment("Second", bob)
        clock.advance(seconds=1)
        early = await comment_service.create_comment(
            "Early reply", bob, parent_id=first.comment.id
        )
        clock.advance(seconds=1)
        late = await comment_service.create_comment(
            "Late reply", alice, parent_id=first.comment.id
        )
        clock.advance(seconds=1)
        nested = await comment_service.create_comment(
            "Nested", alice, parent_id=early.comment.id
        )

        # Act
        page = await comment_service.list_root_comments()

        # Assert
        assert [n.comment.id for n in page.items] == [
            second.comment.id,
            first.comment.id,
        ]
        assert page.total == 2
        assert page.page == 1
        assert page.limit == 30
        assert page.total_pages == 1
        replies = page.items[1].replies
        assert [n.comment.id for n in replies] == [early.comment.id, late.comment.id]
        assert [n.comment.id for n in replies[0].replies] == [nested.comment.id]

    @pytest.mark.asyncio
    async def test_list_roots_paginates(self, unit_env):
        """Pages are 1-based and report total pages."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        for i in range(5):
            await comment_service.create_comment(f"Root {i}", alice)
            clock.advance(seconds=1)

        page = await comment_service.list_root_comments(page=2, limit=2)

        assert [n.comment.content for n in page.items] == ["Root 2", "Root 1"]
        assert page.total == 5
        assert page.total_pages == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("page,limit", [(0, 30), (1, 0), (1, 101)])
    async def test_list_roots_rejects_bad_paging(self, unit_env, page, limit):
        """Out-of-range page or limit fails validation."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(ValidationError):
            await comment_service.list_root_comments(page=page, limit=limit)

    @pytest.mark.asyncio
    async def test_expired_deleted_root_fades_from_listing(self, unit_env):
        """A root deleted past the restore window leaves the listing only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        bob = make_actor("Bob")
        kept = await comment_service.create_comment("Kept", bob)
        clock.advance(seconds=1)
        gone = await comment_service.create_comment("Gone", alice)
        reply = await comment_service.create_comment(
            "Reply", bob, parent_id=gone.comment.id
        )
        await comment_service.delete_comment(gone.comment.id, alice)

        # Act
        clock.advance(minutes=14)
        before_expiry = await comment_service.list_root_comments()
        clock.advance(minutes=2)
        after_expiry = await comment_service.list_root_comments()

        # Assert
        assert [n.comment.id for n in before_expiry.items] == [
            gone.comment.id,
            kept.comment.id,
        ]
        assert [n.comment.id for n in after_expiry.items] == [kept.comment.id]
        assert after_expiry.total == 2

        fetched = await comment_service.get_comment(gone.comment.id)
        assert fetched.comment.is_deleted is True
        assert [n.comment.id for n in fetched.replies] == [reply.comment.id]

    @pytest.mark.asyncio
    async def test_expired_deleted_reply_stays_in_thread(self, unit_env):
        """Deleted replies are kept inside a visible thread."""
        comment_service = await unit_env.get(CommentService)
        clock = await unit_env.get(Clock)
        alice = make_actor("Alice")
        root = await comment_service.create_comment("Root", alice)
        reply = await comment_service.create_comment(
            "Reply", alice, parent_id=root.comment.id
        )
        await comment_service.delete_comment(reply.comment.id, alice)
        clock.advance(hours=1)

        page = await comment_service.list_root_comments()
        replies = await comment_service.list_replies(root.comment.id)

        assert [n.comment.id for n in page.items[0].replies] == [reply.comment.id]
        assert page.items[0].replies[0].comment.is_deleted is True
        assert [n.comment.id for n in replies] == [reply.comment.id]

    @pytest.mark.asyncio
    async def test_list_replies_of_missing_parent(self, unit_env):
        """Listing replies of an unknown comment raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.list_replies(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_missing_comment(self, unit_env):
        """Fetching an unknown comment raises NotFoundError."""
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.get_comment(CommentId(uuid4()))
