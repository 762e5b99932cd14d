"""Create comment use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase, parse_uuid
from discuss.config import CommentSettings
from discuss.domain.service import CommentService
from discuss.domain.value import Actor, CommentId

from .response import CommentResponse


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    content: str
    actor: Actor  # Identity resolved by the caller
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a root comment or replying to a comment."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            settings: Comment settings for the render depth
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The created comment

        Raises:
            ValidationError: If content is empty or parent_id is malformed
            NotFoundError: If the parent does not exist
            InvalidStateError: If the parent is deleted
        """
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent_id"))
            if request.parent_id
            else None
        )
        node = await self.comment_service.create_comment(
            content=request.content,
            actor=request.actor,
            parent_id=parent_id,
        )
        return CommentResponse.from_domain(node, self.settings.render_depth)
