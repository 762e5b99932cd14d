"""Reply tree assembly."""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timedelta

import logfire

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository

from .base import Service


@dataclass
class CommentNode:
    """A comment with its derived permissions and its resolved replies.

    ``can_edit`` and ``can_restore`` are computed from the comment's
    timestamps at assembly time and never stored.
    """

    comment: Comment
    can_edit: bool
    can_restore: bool
    can_delete: bool = True
    replies: list["CommentNode"] = field(default_factory=list)

    def count(self) -> int:
        """Number of comments in this subtree, including this one."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.replies)
        return total


class ThreadAssembler(Service):
    """Builds ordered reply trees from the comment store.

    Trees are resolved breadth-first with an explicit work-list so that deep
    threads never grow the call stack. Children are ordered oldest first at
    every level, as returned by ``CommentRepository.find_children``.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        edit_window: timedelta,
        restore_window: timedelta,
    ) -> None:
        """Initialize thread assembler.

        Args:
            comment_repository: Comment repository used for child lookups
            edit_window: How long after creation a comment stays editable
            restore_window: How long after deletion a comment stays restorable
        """
        self.comment_repository = comment_repository
        self.edit_window = edit_window
        self.restore_window = restore_window

    def node(self, comment: Comment, now: datetime) -> CommentNode:
        """Wrap a single comment without resolving its replies."""
        return CommentNode(
            comment=comment,
            can_edit=comment.can_edit(now, self.edit_window),
            can_restore=comment.can_restore(now, self.restore_window),
        )

    def is_listed(self, root: Comment, now: datetime) -> bool:
        """Whether a root belongs in the root listing.

        Roots deleted longer ago than the restore window fade out of the
        listing. Replies are never filtered, so threads stay continuous.
        """
        return not root.is_faded(now, self.restore_window)

    async def build(self, roots: list[Comment], now: datetime) -> list[CommentNode]:
        """Resolve the full reply forest under each given comment.

        Args:
            roots: Comments to start from, kept in the given order
            now: Instant used for every derived flag in the forest

        Returns:
            One node per root with replies resolved to unbounded depth
        """
        with logfire.span("thread_assembler.build", root_count=len(roots)):
            top = [self.node(comment, now) for comment in roots]
            pending: deque[CommentNode] = deque(top)
            resolved = 0

            while pending:
                parent = pending.popleft()
                children = await self.comment_repository.find_children(
                    parent.comment.id
                )
                for child in children:
                    child_node = self.node(child, now)
                    parent.replies.append(child_node)
                    pending.append(child_node)
                resolved += 1

            logfire.debug("Threads assembled", roots=len(top), comments=resolved)
            return top

    async def build_one(self, root: Comment, now: datetime) -> CommentNode:
        """Resolve the reply tree under a single comment."""
        (node,) = await self.build([root], now)
        return node
