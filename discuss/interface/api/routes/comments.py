"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import BaseModel

from discuss.application.usecase.comment import (
    CommentActionRequest,
    CommentPageResponse,
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    RestoreCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from discuss.config import CommentSettings
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.interface.api.auth import require_actor
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: str | None = None  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for editing a comment."""

    content: str


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Post a root comment or reply to an existing comment.

    Requires authentication. Replying to another user's comment notifies
    that user.

    Args:
        request: Comment content and optional parent ID
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie
        authorization: Bearer token header

    Returns:
        The created comment
    """
    actor = require_actor(jwt_service, auth_token, authorization, "post comments")
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                content=request.content,
                actor=actor,
                parent_id=request.parent_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("", response_model=CommentPageResponse)
async def list_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    settings: FromDishka[CommentSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
) -> CommentPageResponse:
    """List root comments, newest first, with their reply trees.

    Roots deleted longer ago than the restore window are left out.

    Args:
        get_comments_use_case: Get comments use case from DI
        settings: Comment settings for the default page size
        page: 1-based page number
        limit: Page size (defaults to the configured page size)
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(page=page, limit=limit or settings.page_size)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> CommentResponse:
    """Get one comment with its reply subtree.

    Replies deeper than the configured render depth are cut off; the last
    rendered comment then has ``has_more_replies`` set and can be fetched
    here to continue down the thread.
    """
    try:
        return await get_comment_use_case.execute(comment_id)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/{comment_id}/replies", response_model=list[CommentResponse])
async def get_replies(
    comment_id: str,
    get_replies_use_case: FromDishka[GetRepliesUseCase],
) -> list[CommentResponse]:
    """List the replies to a comment, oldest first, nested to the render depth."""
    try:
        return await get_replies_use_case.execute(comment_id)
    except DomainError as e:
        raise to_http_exception(e) from e


@router.put("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Edit a comment's content.

    Only the author can edit, and only within the edit window.

    Raises:
        HTTPException: 401 unauthenticated, 403 not the author, 404 unknown
            comment, 409 deleted or window expired, 422 empty content
    """
    actor = require_actor(jwt_service, auth_token, authorization, "edit comments")
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=comment_id, content=request.content, actor=actor
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.delete("/{comment_id}", response_model=CommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Soft-delete a comment.

    The comment stays in the tree as a tombstone; its replies remain.
    """
    actor = require_actor(jwt_service, auth_token, authorization, "delete comments")
    try:
        return await delete_comment_use_case.execute(
            CommentActionRequest(comment_id=comment_id, actor=actor)
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.post("/{comment_id}/restore", response_model=CommentResponse)
async def restore_comment(
    comment_id: str,
    restore_comment_use_case: FromDishka[RestoreCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentResponse:
    """Undo a soft delete within the restore window."""
    actor = require_actor(jwt_service, auth_token, authorization, "restore comments")
    try:
        return await restore_comment_use_case.execute(
            CommentActionRequest(comment_id=comment_id, actor=actor)
        )
    except DomainError as e:
        raise to_http_exception(e) from e
