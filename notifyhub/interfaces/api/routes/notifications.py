"""Endpoints to create, list and acknowledge notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from notifyhub.application.use_cases.notifications import (
    count_notifications as count_notifications_uc,
    create_and_deliver as create_and_deliver_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read as mark_all_notifications_read_uc,
    mark_notification_read as mark_notification_read_uc,
)
from notifyhub.config import Settings
from notifyhub.domain.entities import Notification
from notifyhub.domain.exceptions import NotFoundError, ValidationError
from notifyhub.infrastructure.database import get_db
from notifyhub.infrastructure.realtime import NotificationBroadcaster, RealtimeHub
from notifyhub.interfaces.api.dependencies import (
    get_app_settings,
    get_broadcaster,
    get_realtime_hub,
    require_api_key,
)
from notifyhub.interfaces.api.schemas import (
    MarkAllReadResult,
    NotificationCreate,
    NotificationCreated,
    NotificationHistory,
    NotificationMarkedRead,
    NotificationRead,
)

router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"],
    dependencies=[Depends(require_api_key)],
)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead(
        id=notification.id or "",
        receiver_id=notification.receiver_id,
        type=notification.type,
        payload=notification.payload or {},
        read=notification.read,
        app_id=notification.app_id,
        sender_id=notification.sender_id,
        channel=notification.channel,
        created_at=notification.created_at,
        updated_at=notification.updated_at,
    )


@router.post("", response_model=NotificationCreated, status_code=status.HTTP_201_CREATED)
def create_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
    broadcaster: NotificationBroadcaster = Depends(get_broadcaster),
) -> NotificationCreated:
    """Store a notification and push it to the receiver's live sessions."""

    try:
        result = create_and_deliver_uc(
            db,
            broadcaster,
            receiver_id=notification_in.receiver_id,
            type=notification_in.type,
            payload=notification_in.payload,
            app_id=notification_in.app_id,
            sender_id=notification_in.sender_id,
            channel=notification_in.channel,
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return NotificationCreated(
        notification=_notification_to_schema(result.notification),
        delivered=result.delivered,
    )


@router.get("/{receiver_id}", response_model=NotificationHistory)
def read_notifications(
    receiver_id: str,
    app_id: str | None = Query(None, alias="appId", description="Application ID (required)"),
    unread_only: bool = Query(False, alias="unreadOnly"),
    type: str | None = Query(None, description="Filter by notification type"),
    channel: str | None = Query(None, description="Filter by channel"),
    limit: int | None = Query(None, ge=1, description="Maximum number of notifications"),
    skip: int = Query(0, ge=0, description="Number of notifications to skip"),
    db: Session = Depends(get_db),
    hub: RealtimeHub = Depends(get_realtime_hub),
    settings: Settings = Depends(get_app_settings),
) -> NotificationHistory:
    """Return a page of the receiver's notifications with its counters."""

    try:
        notifications = list_notifications_uc(
            db,
            receiver_id,
            app_id=app_id,
            unread_only=unread_only,
            type=type,
            channel=channel,
            limit=limit or settings.default_page_size,
            skip=skip,
        )
        total = count_notifications_uc(db, receiver_id, app_id=app_id)
        unread_count = count_notifications_uc(db, receiver_id, app_id=app_id, read=False)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return NotificationHistory(
        notifications=[_notification_to_schema(n) for n in notifications],
        total=total,
        unread_count=unread_count,
        is_online=hub.is_online(receiver_id),
    )


@router.patch("/{notification_id}/read", response_model=NotificationMarkedRead)
def mark_notification_read(
    notification_id: str,
    db: Session = Depends(get_db),
) -> NotificationMarkedRead:
    """Mark a single notification as read."""

    try:
        notification = mark_notification_read_uc(db, notification_id)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

    return NotificationMarkedRead(notification=_notification_to_schema(notification))


@router.patch("/{receiver_id}/read-all", response_model=MarkAllReadResult)
def mark_all_notifications_read(
    receiver_id: str,
    app_id: str | None = Query(None, alias="appId", description="Application ID (required)"),
    type: str | None = Query(None, description="Filter by notification type"),
    channel: str | None = Query(None, description="Filter by channel"),
    db: Session = Depends(get_db),
) -> MarkAllReadResult:
    """Mark every unread notification of the receiver as read."""

    try:
        modified_count = mark_all_notifications_read_uc(
            db, receiver_id, app_id=app_id, type=type, channel=channel
        )
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return MarkAllReadResult(modified_count=modified_count)
