"""Notification routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, Response, status

from discuss.application.usecase.notification import (
    GetUnreadCountUseCase,
    ListNotificationsRequest,
    ListNotificationsResponse,
    ListNotificationsUseCase,
    MarkAllReadUseCase,
    MarkReadRequest,
    MarkReadUseCase,
    NotificationResponse,
    UnreadCountResponse,
)
from discuss.config import NotificationSettings
from discuss.domain.error import DomainError
from discuss.domain.service import JWTService
from discuss.interface.api.auth import require_actor
from discuss.interface.error import to_http_exception

router = APIRouter(
    prefix="/notifications", tags=["notifications"], route_class=DishkaRoute
)


@router.get("", response_model=ListNotificationsResponse)
async def list_notifications(
    list_notifications_use_case: FromDishka[ListNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    settings: FromDishka[NotificationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ListNotificationsResponse:
    """List the caller's notifications, newest first."""
    actor = require_actor(
        jwt_service, auth_token, authorization, "read notifications"
    )
    try:
        return await list_notifications_use_case.execute(
            ListNotificationsRequest(
                actor=actor, page=page, limit=limit or settings.page_size
            )
        )
    except DomainError as e:
        raise to_http_exception(e) from e


@router.get("/unread-count", response_model=UnreadCountResponse)
async def unread_count(
    get_unread_count_use_case: FromDishka[GetUnreadCountUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UnreadCountResponse:
    """Count the caller's unread notifications. Meant for polling."""
    actor = require_actor(
        jwt_service, auth_token, authorization, "read notifications"
    )
    return await get_unread_count_use_case.execute(actor)


@router.put("/read-all", status_code=status.HTTP_204_NO_CONTENT)
async def mark_all_read(
    mark_all_read_use_case: FromDishka[MarkAllReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> Response:
    """Mark every notification of the caller as read."""
    actor = require_actor(
        jwt_service, auth_token, authorization, "update notifications"
    )
    await mark_all_read_use_case.execute(actor)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
async def mark_read(
    notification_id: str,
    mark_read_use_case: FromDishka[MarkReadUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> NotificationResponse:
    """Mark one of the caller's notifications as read.

    Raises:
        HTTPException: 401 unauthenticated, 403 someone else's notification,
            404 unknown notification
    """
    actor = require_actor(
        jwt_service, auth_token, authorization, "update notifications"
    )
    try:
        return await mark_read_use_case.execute(
            MarkReadRequest(notification_id=notification_id, actor=actor)
        )
    except DomainError as e:
        raise to_http_exception(e) from e
