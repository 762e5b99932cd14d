"""Update comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase, parse_uuid
from discuss.config import CommentSettings
from discuss.domain.service import CommentService
from discuss.domain.value import Actor, CommentId

from .response import CommentResponse


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    content: str  # New content (required, cannot be blank)
    actor: Actor  # Must be the author


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's content within the edit window."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            settings: Comment settings for the render depth
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: UpdateCommentRequest) -> CommentResponse:
        """Execute update comment flow.

        Raises:
            ValidationError: If content is empty or the ID is malformed
            NotFoundError: If the comment does not exist
            ForbiddenError: If the actor is not the author
            InvalidStateError: If deleted or the edit window has expired
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))
        node = await self.comment_service.edit_comment(
            comment_id, request.content, request.actor
        )
        return CommentResponse.from_domain(node, self.settings.render_depth)
