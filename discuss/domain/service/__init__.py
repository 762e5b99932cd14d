"""Domain services."""

from .base import Service
from .clock import Clock
from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .pagination import Page
from .thread_assembler import CommentNode, ThreadAssembler

__all__ = [
    "Clock",
    "CommentNode",
    "CommentService",
    "JWTService",
    "NotificationService",
    "Page",
    "Service",
    "ThreadAssembler",
]
