"""Delete and restore comment use cases."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase, parse_uuid
from discuss.config import CommentSettings
from discuss.domain.service import CommentService
from discuss.domain.value import Actor, CommentId

from .response import CommentResponse


class CommentActionRequest(BaseModel):
    """Request naming a comment and the identity acting on it."""

    comment_id: str  # UUID string
    actor: Actor


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft-deleting a comment."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: CommentActionRequest) -> CommentResponse:
        """Soft-delete the comment.

        Raises:
            NotFoundError, ForbiddenError, InvalidStateError
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))
        node = await self.comment_service.delete_comment(comment_id, request.actor)
        return CommentResponse.from_domain(node, self.settings.render_depth)


class RestoreCommentUseCase(BaseUseCase):
    """Use case for undoing a soft delete within the restore window."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: CommentActionRequest) -> CommentResponse:
        """Restore the comment.

        Raises:
            NotFoundError, ForbiddenError, InvalidStateError
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))
        node = await self.comment_service.restore_comment(comment_id, request.actor)
        return CommentResponse.from_domain(node, self.settings.render_depth)
