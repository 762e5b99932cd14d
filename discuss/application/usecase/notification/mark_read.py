"""Mark notifications read use cases."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase, parse_uuid
from discuss.domain.service import NotificationService
from discuss.domain.value import Actor, NotificationId

from .response import NotificationResponse


class MarkReadRequest(BaseModel):
    """Mark one notification read request."""

    notification_id: str  # UUID string
    actor: Actor  # Must be the recipient


class MarkReadUseCase(BaseUseCase):
    """Use case for marking a single notification read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: MarkReadRequest) -> NotificationResponse:
        """Mark the notification read.

        Raises:
            ValidationError: If the ID is malformed
            NotFoundError: If the notification does not exist
            ForbiddenError: If it belongs to someone else
        """
        notification_id = NotificationId(
            parse_uuid(request.notification_id, "notification_id")
        )
        notification = await self.notification_service.mark_read(
            notification_id, request.actor.id
        )
        return NotificationResponse.from_domain(notification)


class MarkAllReadUseCase(BaseUseCase):
    """Use case for clearing the actor's unread notifications."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, actor: Actor) -> None:
        await self.notification_service.mark_all_read(actor.id)
