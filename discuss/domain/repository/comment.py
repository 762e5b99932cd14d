"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId

# Fields a partial update may touch; identity and threading never change
UPDATABLE_FIELDS = frozenset(
    {"content", "is_edited", "is_deleted", "deleted_at", "updated_at"}
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Args:
            comment: The comment to insert

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def update(
        self,
        comment_id: CommentId,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> Comment:
        """Apply a partial update to a comment.

        The write only happens if the stored version still equals
        ``expected_version`` (when given). A successful write bumps the
        version by one.

        Args:
            comment_id: The comment to update
            changes: Field names mapped to their new values
            expected_version: Version read before the update was decided

        Returns:
            The updated comment

        Raises:
            NotFoundError: If the comment does not exist
            ConcurrentModificationError: If the version no longer matches
        """
        pass

    @abstractmethod
    async def find_roots(self, offset: int, limit: int) -> tuple[list[Comment], int]:
        """Find a page of root comments, newest first.

        Args:
            offset: Number of roots to skip
            limit: Maximum number of roots to return

        Returns:
            The page of roots and the total number of roots
        """
        pass

    @abstractmethod
    async def find_children(self, parent_id: CommentId) -> list[Comment]:
        """Find direct replies to a comment, oldest first.

        Soft-deleted replies are included.

        Args:
            parent_id: The parent comment ID

        Returns:
            List of child comments
        """
        pass
