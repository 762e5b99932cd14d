"""Comment entity.

Comments form a forest: roots have no parent and replies point at the
comment they answer. Nesting depth is unbounded.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field, model_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, DisplayName, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for roots), never changes
    - depth: Nesting level (0 for roots, parent depth + 1 for replies)

    Comments are never physically removed. A soft delete sets ``is_deleted``
    and ``deleted_at`` together; a restore clears both.
    """

    id: CommentId
    content: str = Field(min_length=1)
    author_id: UserId
    author_name: DisplayName
    parent_id: Optional[CommentId] = None
    depth: int = Field(default=0, ge=0)
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    is_edited: bool = False
    created_at: datetime
    updated_at: datetime
    version: int = Field(default=1, ge=1)  # Bumped by the store on each update

    @model_validator(mode="after")
    def check_deletion_fields(self) -> "Comment":
        """deleted_at is set if and only if the comment is deleted."""
        if self.is_deleted != (self.deleted_at is not None):
            raise ValueError("deleted_at must be set exactly when is_deleted is true")
        return self

    def can_edit(self, now: datetime, window: timedelta) -> bool:
        """Whether the content may still be changed at ``now``."""
        return not self.is_deleted and now - self.created_at < window

    def can_restore(self, now: datetime, window: timedelta) -> bool:
        """Whether a soft delete may still be undone at ``now``."""
        if not self.is_deleted or self.deleted_at is None:
            return False
        return now - self.deleted_at < window

    def is_faded(self, now: datetime, window: timedelta) -> bool:
        """Deleted and past the restore window (a tombstone)."""
        return self.is_deleted and not self.can_restore(now, window)
