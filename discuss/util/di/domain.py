"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, CommentSettings
from discuss.domain.repository import CommentRepository, NotificationRepository
from discuss.domain.service import (
    Clock,
    CommentService,
    JWTService,
    NotificationService,
    ThreadAssembler,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_thread_assembler(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> ThreadAssembler:
        """Provide thread assembler configured with the lifecycle windows."""
        return ThreadAssembler(
            comment_repository=comment_repository,
            edit_window=settings.edit_window,
            restore_window=settings.restore_window,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository, clock: Clock
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository, clock=clock
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        notification_service: NotificationService,
        thread_assembler: ThreadAssembler,
        clock: Clock,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            notification_service=notification_service,
            thread_assembler=thread_assembler,
            clock=clock,
            settings=settings,
        )
