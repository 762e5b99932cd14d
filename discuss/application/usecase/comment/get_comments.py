"""Read-side comment use cases."""

import logfire
from pydantic import BaseModel, Field

from discuss.application.usecase.base import BaseUseCase, parse_uuid
from discuss.config import CommentSettings
from discuss.domain.service import CommentService
from discuss.domain.value import CommentId

from .response import CommentPageResponse, CommentResponse


class GetCommentsRequest(BaseModel):
    """List root comments request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=30, ge=1, le=100)


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing root comments with their threads."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            settings: Comment settings for the render depth
        """
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, request: GetCommentsRequest) -> CommentPageResponse:
        """Execute list root comments flow.

        Args:
            request: Pagination parameters

        Returns:
            Page of root comments, newest first, replies nested to the render depth
        """
        page = await self.comment_service.list_root_comments(
            page=request.page, limit=request.limit
        )
        response = CommentPageResponse.from_domain(page, self.settings.render_depth)
        logfire.info(
            "Comment page served",
            page=response.page,
            count=len(response.comments),
            total=response.total,
        )
        return response


class GetCommentUseCase(BaseUseCase):
    """Use case for fetching one comment with its full subtree."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, comment_id: str) -> CommentResponse:
        """Fetch the comment.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the comment does not exist
        """
        node = await self.comment_service.get_comment(
            CommentId(parse_uuid(comment_id, "comment_id"))
        )
        return CommentResponse.from_domain(node, self.settings.render_depth)


class GetRepliesUseCase(BaseUseCase):
    """Use case for listing the nested replies under a comment."""

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        self.comment_service = comment_service
        self.settings = settings

    async def execute(self, comment_id: str) -> list[CommentResponse]:
        """List replies, oldest first at each level.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the parent does not exist
        """
        replies = await self.comment_service.list_replies(
            CommentId(parse_uuid(comment_id, "comment_id"))
        )
        return [
            CommentResponse.from_domain(node, self.settings.render_depth)
            for node in replies
        ]
