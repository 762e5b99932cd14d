"""Comment domain service.

Owns the comment lifecycle: create (root or reply), edit within the edit
window, soft delete, and restore within the restore window. Replies to
another user's comment notify that user.
"""

import logfire
from datetime import datetime
from uuid import uuid4

from discuss.config import CommentSettings
from discuss.domain.error import (
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import Actor, CommentId

from .base import Service
from .clock import Clock
from .notification_service import NotificationService
from .pagination import Page, page_offset
from .thread_assembler import CommentNode, ThreadAssembler


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
        thread_assembler: ThreadAssembler,
        clock: Clock,
        settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            notification_service: Records reply notifications
            thread_assembler: Resolves reply trees for read paths
            clock: Source of the current instant
            settings: Window lengths and content limits
        """
        self.comment_repository = comment_repository
        self.notification_service = notification_service
        self.thread_assembler = thread_assembler
        self.clock = clock
        self.settings = settings

    def _check_content(self, content: str) -> None:
        if not content.strip():
            raise ValidationError("Comment content must not be empty")
        if len(content) > self.settings.max_length:
            raise ValidationError(
                f"Comment content must be at most {self.settings.max_length} characters"
            )

    async def _get_owned(
        self, comment_id: CommentId, actor: Actor, action: str
    ) -> Comment:
        """Load a comment and check the actor owns it."""
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        if comment.author_id != actor.id:
            logfire.warn(
                "Comment ownership check failed",
                comment_id=str(comment_id),
                author_id=str(comment.author_id),
                actor_id=str(actor.id),
                action=action,
            )
            raise ForbiddenError("comment", str(comment_id), str(actor.id), action)
        return comment

    async def create_comment(
        self,
        content: str,
        actor: Actor,
        parent_id: CommentId | None = None,
    ) -> CommentNode:
        """Create a root comment or a reply.

        A reply to someone else's comment notifies the parent's author. The
        notification is written after the comment and a failure there is
        logged, not raised: the comment already exists.

        Args:
            content: Comment text
            actor: Identity creating the comment
            parent_id: Comment being replied to (None for a root comment)

        Returns:
            The created comment with no replies

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the parent does not exist
            InvalidStateError: If the parent is soft-deleted
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(actor.id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            self._check_content(content)
            now = self.clock.now()

            parent: Comment | None = None
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.is_deleted:
                    logfire.warn(
                        "Reply to deleted comment rejected", parent_id=str(parent_id)
                    )
                    raise InvalidStateError("Cannot reply to a deleted comment")

            comment = Comment(
                id=CommentId(uuid4()),
                content=content,
                author_id=actor.id,
                author_name=actor.display_name,
                parent_id=parent.id if parent else None,
                depth=parent.depth + 1 if parent else 0,
                is_deleted=False,
                deleted_at=None,
                is_edited=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.insert(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                parent_id=str(saved.parent_id) if saved.parent_id else None,
                depth=saved.depth,
            )

            if parent is not None and parent.author_id != actor.id:
                await self._notify_reply(parent, saved, actor, now)

            return self.thread_assembler.node(saved, now)

    async def _notify_reply(
        self, parent: Comment, reply: Comment, actor: Actor, now: datetime
    ) -> None:
        try:
            await self.notification_service.notify_reply(parent, reply, actor, now)
        except Exception as e:
            logfire.error(
                "Reply notification failed",
                comment_id=str(reply.id),
                recipient_id=str(parent.author_id),
                error=str(e),
                error_type=type(e).__name__,
            )

    async def edit_comment(
        self, comment_id: CommentId, content: str, actor: Actor
    ) -> CommentNode:
        """Replace a comment's content.

        Only the author may edit, only while the comment is not deleted and
        only within the edit window counted from creation.

        Raises:
            ValidationError: If content is empty or too long
            NotFoundError: If the comment does not exist
            ForbiddenError: If the actor is not the author
            InvalidStateError: If deleted or the edit window has expired
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
            content_length=len(content),
        ):
            now = self.clock.now()
            comment = await self._get_owned(comment_id, actor, "edit")

            if comment.is_deleted:
                raise InvalidStateError("Cannot edit a deleted comment")
            if not comment.can_edit(now, self.settings.edit_window):
                logfire.info("Edit window expired", comment_id=str(comment_id))
                raise InvalidStateError(
                    f"Edit window has expired ({self.settings.edit_window_minutes} minutes)"
                )
            self._check_content(content)

            updated = await self.comment_repository.update(
                comment_id,
                {"content": content, "is_edited": True, "updated_at": now},
                expected_version=comment.version,
            )
            logfire.info("Comment edited", comment_id=str(comment_id))
            return await self.thread_assembler.build_one(updated, now)

    async def delete_comment(self, comment_id: CommentId, actor: Actor) -> CommentNode:
        """Soft-delete a comment. Not time-boxed.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the actor is not the author
            InvalidStateError: If the comment is already deleted
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            now = self.clock.now()
            comment = await self._get_owned(comment_id, actor, "delete")

            if comment.is_deleted:
                raise InvalidStateError("Comment is already deleted")

            updated = await self.comment_repository.update(
                comment_id,
                {"is_deleted": True, "deleted_at": now, "updated_at": now},
                expected_version=comment.version,
            )
            logfire.info("Comment deleted", comment_id=str(comment_id))
            return await self.thread_assembler.build_one(updated, now)

    async def restore_comment(
        self, comment_id: CommentId, actor: Actor
    ) -> CommentNode:
        """Undo a soft delete within the restore window.

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the actor is not the author
            InvalidStateError: If not deleted or the restore window has expired
        """
        with logfire.span(
            "comment_service.restore_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            now = self.clock.now()
            comment = await self._get_owned(comment_id, actor, "restore")

            if not comment.is_deleted:
                raise InvalidStateError("Comment is not deleted")
            if not comment.can_restore(now, self.settings.restore_window):
                logfire.info("Restore window expired", comment_id=str(comment_id))
                raise InvalidStateError(
                    f"Restore window has expired ({self.settings.restore_window_minutes} minutes)"
                )

            updated = await self.comment_repository.update(
                comment_id,
                {"is_deleted": False, "deleted_at": None, "updated_at": now},
                expected_version=comment.version,
            )
            logfire.info("Comment restored", comment_id=str(comment_id))
            return await self.thread_assembler.build_one(updated, now)

    async def get_comment(self, comment_id: CommentId) -> CommentNode:
        """Get a comment with its full reply subtree.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_comment", comment_id=str(comment_id)):
            now = self.clock.now()
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return await self.thread_assembler.build_one(comment, now)

    async def list_root_comments(
        self, page: int = 1, limit: int = 30
    ) -> Page[CommentNode]:
        """List root comments newest first, each with its full reply tree.

        Roots whose restore window has lapsed after deletion are left out of
        ``items``; ``total`` still counts every stored root.

        Raises:
            ValidationError: If page or limit is out of range
        """
        with logfire.span(
            "comment_service.list_root_comments", page=page, limit=limit
        ):
            offset = page_offset(page, limit)
            now = self.clock.now()
            roots, total = await self.comment_repository.find_roots(
                offset=offset, limit=limit
            )
            listed = [
                root for root in roots if self.thread_assembler.is_listed(root, now)
            ]
            items = await self.thread_assembler.build(listed, now)
            logfire.info(
                "Root comments listed",
                count=len(items),
                faded=len(roots) - len(listed),
                total=total,
            )
            return Page(items=items, total=total, page=page, limit=limit)

    async def list_replies(self, parent_id: CommentId) -> list[CommentNode]:
        """List the replies under a comment, oldest first, fully nested.

        Raises:
            NotFoundError: If the parent does not exist
        """
        with logfire.span("comment_service.list_replies", parent_id=str(parent_id)):
            now = self.clock.now()
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None:
                logfire.warn("Parent comment not found", parent_id=str(parent_id))
                raise NotFoundError("Comment", str(parent_id))
            node = await self.thread_assembler.build_one(parent, now)
            return node.replies
