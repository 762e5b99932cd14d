"""PostgreSQL implementation of Comment repository."""

from typing import Any, List, Optional

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.error import ConcurrentModificationError, NotFoundError
from discuss.domain.model import Comment
from discuss.domain.repository.comment import UPDATABLE_FIELDS, CommentRepository
from discuss.domain.value import CommentId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def update(
        self,
        comment_id: CommentId,
        changes: dict[str, Any],
        expected_version: int | None = None,
    ) -> Comment:
        """Compare-and-write partial update.

        The version check and the write happen in one UPDATE statement, so a
        competing writer can never be silently overwritten.
        """
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update comment fields: {sorted(unknown)}")

        stmt = update(comments_table).where(comments_table.c.id == comment_id)
        if expected_version is not None:
            stmt = stmt.where(comments_table.c.version == expected_version)
        stmt = stmt.values(
            **changes, version=comments_table.c.version + 1
        ).returning(comments_table)

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            if await self.find_by_id(comment_id) is None:
                raise NotFoundError("Comment", str(comment_id))
            raise ConcurrentModificationError("Comment", str(comment_id))

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def find_roots(self, offset: int, limit: int) -> tuple[List[Comment], int]:
        """Find a page of root comments, newest first."""
        is_root = comments_table.c.parent_id.is_(None)

        count_stmt = select(func.count()).select_from(comments_table).where(is_root)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(comments_table)
            .where(is_root)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()], total

    async def find_children(self, parent_id: CommentId) -> List[Comment]:
        """Find direct replies of a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]
