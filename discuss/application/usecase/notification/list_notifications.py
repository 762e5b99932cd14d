"""List notifications use case."""

from pydantic import BaseModel, Field

from discuss.application.usecase.base import BaseUseCase
from discuss.domain.service import NotificationService
from discuss.domain.value import Actor

from .response import NotificationResponse


class ListNotificationsRequest(BaseModel):
    """List notifications request."""

    actor: Actor
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListNotificationsResponse(BaseModel):
    """A page of the actor's notifications."""

    notifications: list[NotificationResponse]
    total: int
    total_pages: int
    page: int
    limit: int


class ListNotificationsUseCase(BaseUseCase):
    """Use case for listing the actor's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        """Initialize list notifications use case.

        Args:
            notification_service: Notification domain service
        """
        self.notification_service = notification_service

    async def execute(
        self, request: ListNotificationsRequest
    ) -> ListNotificationsResponse:
        page = await self.notification_service.list_for_user(
            request.actor.id, page=request.page, limit=request.limit
        )
        return ListNotificationsResponse(
            notifications=[NotificationResponse.from_domain(n) for n in page.items],
            total=page.total,
            total_pages=page.total_pages,
            page=page.page,
            limit=page.limit,
        )
