"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    GetCommentUseCase,
    GetRepliesUseCase,
    RestoreCommentUseCase,
    UpdateCommentUseCase,
)
from discuss.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkReadUseCase,
)
from discuss.config import CommentSettings
from discuss.domain.service import CommentService, NotificationService
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_restore_comment_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> RestoreCommentUseCase:
        """Provide restore comment use case."""
        return RestoreCommentUseCase(
            comment_service=comment_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> GetCommentsUseCase:
        """Provide list root comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> GetCommentUseCase:
        """Provide get comment use case."""
        return GetCommentUseCase(
            comment_service=comment_service, settings=settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_replies_use_case(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> GetRepliesUseCase:
        """Provide list replies use case."""
        return GetRepliesUseCase(
            comment_service=comment_service, settings=settings
        )

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_list_notifications_use_case(
        self, notification_service: NotificationService
    ) -> ListNotificationsUseCase:
        """Provide list notifications use case."""
        return ListNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_use_case(
        self, notification_service: NotificationService
    ) -> GetUnreadCountUseCase:
        """Provide unread count use case."""
        return GetUnreadCountUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkReadUseCase:
        """Provide mark read use case."""
        return MarkReadUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkAllReadUseCase:
        """Provide mark all read use case."""
        return MarkAllReadUseCase(notification_service=notification_service)
