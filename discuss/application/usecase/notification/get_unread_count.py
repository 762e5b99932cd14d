"""Unread notification count use case."""

from pydantic import BaseModel

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import NotificationService
from discuss.domain.value import Actor


class UnreadCountResponse(BaseModel):
    """Unread notification count."""

    count: int


class GetUnreadCountUseCase(BaseUseCase):
    """Use case for polling the unread badge count."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, actor: Actor) -> UnreadCountResponse:
        count = await self.notification_service.unread_count(actor.id)
        return UnreadCountResponse(count=count)
