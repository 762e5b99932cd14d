"""In-memory comment repository for testing."""

from itertools import count
from typing import Any, Optional

from discuss.domain.error import ConcurrentModificationError, NotFoundError
from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import UPDATABLE_FIELDS, CommentRepository
from discuss.domain.value import CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Insertion order breaks ties between comments created at the same instant.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._sequence: dict[CommentId, int] = {}
        self._counter = count()

    def _order(self, comment: Comment) -> tuple:
        return (comment.created_at, self._sequence[comment.id])

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        if comment.id in self._comments:
            raise ValueError(f"Comment already exists: {comment.id}")
        self._comments[comment.id] = comment
        self._sequence[comment.id] = next(self._counter)
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def update(
        self,
        comment_id: CommentId,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> Comment:
        """Compare-and-write partial update."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update comment fields: {sorted(unknown)}")

        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        if expected_version is not None and comment.version != expected_version:
            raise ConcurrentModificationError("Comment", str(comment_id))

        # Re-validate so the deleted_at/is_deleted invariant is enforced
        updated = Comment.model_validate(
            comment.model_dump() | changes | {"version": comment.version + 1}
        )
        self._comments[comment_id] = updated
        return updated

    async def find_roots(self, offset: int, limit: int) -> tuple[list[Comment], int]:
        """Find a page of root comments, newest first."""
        roots = [c for c in self._comments.values() if c.parent_id is None]
        roots.sort(key=self._order, reverse=True)
        return roots[offset : offset + limit], len(roots)

    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        children = [c for c in self._comments.values() if c.parent_id == parent_id]
        children.sort(key=self._order)
        return children
