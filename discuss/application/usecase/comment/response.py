"""Comment response models shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.service import CommentNode, Page


class CommentResponse(BaseModel):
    """A comment with its derived permissions and nested replies.

    Replies are rendered down to a fixed number of levels below the
    requested comment. A comment at the last rendered level carries no
    ``replies`` and sets ``has_more_replies`` when it has any; clients fetch
    the rest with ``GET /comments/{comment_id}``.
    """

    comment_id: str
    content: str
    author_id: str
    author_name: str
    parent_id: str | None
    depth: int
    is_deleted: bool
    deleted_at: datetime | None
    is_edited: bool
    created_at: datetime
    updated_at: datetime
    can_edit: bool
    can_delete: bool
    can_restore: bool
    has_more_replies: bool = False
    replies: list["CommentResponse"]

    @classmethod
    def from_domain(cls, node: CommentNode, render_depth: int) -> "CommentResponse":
        """Convert a domain CommentNode tree to response models.

        Children are converted before their parents with an explicit stack,
        so deep threads do not recurse.

        Args:
            node: Root of the subtree to render
            render_depth: Reply levels to render below ``node``
        """
        converted: dict[int, CommentResponse] = {}
        stack: list[tuple[CommentNode, int, bool]] = [(node, 0, False)]

        while stack:
            current, level, children_done = stack.pop()
            truncated = level >= render_depth
            if not children_done and not truncated:
                stack.append((current, level, True))
                stack.extend((child, level + 1, False) for child in current.replies)
                continue

            comment = current.comment
            converted[id(current)] = cls(
                comment_id=str(comment.id),
                content=comment.content,
                author_id=str(comment.author_id),
                author_name=str(comment.author_name),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                depth=comment.depth,
                is_deleted=comment.is_deleted,
                deleted_at=comment.deleted_at,
                is_edited=comment.is_edited,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
                can_edit=current.can_edit,
                can_delete=current.can_delete,
                can_restore=current.can_restore,
                has_more_replies=truncated and bool(current.replies),
                replies=(
                    []
                    if truncated
                    else [converted.pop(id(child)) for child in current.replies]
                ),
            )

        return converted[id(node)]


class CommentPageResponse(BaseModel):
    """A page of root comments."""

    comments: list[CommentResponse]
    total: int
    total_pages: int
    page: int
    limit: int

    @classmethod
    def from_domain(
        cls, page: Page[CommentNode], render_depth: int
    ) -> "CommentPageResponse":
        return cls(
            comments=[
                CommentResponse.from_domain(node, render_depth) for node in page.items
            ],
            total=page.total,
            total_pages=page.total_pages,
            page=page.page,
            limit=page.limit,
        )
