"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    CommentActionRequest,
    DeleteCommentUseCase,
    RestoreCommentUseCase,
)
from .get_comments import (
    GetCommentsRequest,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
)
from .response import CommentPageResponse, CommentResponse
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentActionRequest",
    "CommentPageResponse",
    "CommentResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentUseCase",
    "GetCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "GetRepliesUseCase",
    "RestoreCommentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
