"""Use case that stores a notification and pushes it to live sessions."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from notifyhub.domain.entities import DeliveryResult, JSONPayload
from notifyhub.infrastructure.realtime import (
    NotificationBroadcaster,
    serialize_notification_event,
)

from .create_notification import create_notification

logger = logging.getLogger(__name__)


def create_and_deliver(
    session: Session,
    broadcaster: NotificationBroadcaster,
    *,
    receiver_id: str | None,
    type: str | None,
    payload: JSONPayload | None = None,
    app_id: str | None = None,
    sender_id: str | None = None,
    channel: str | None = None,
) -> DeliveryResult:
    """Persist the notification first, then attempt a best-effort live push.

    A ``delivered`` value of ``False`` never means the notification was lost:
    it is already stored and listed in the receiver's history.
    """

    notification = create_notification(
        session,
        receiver_id=receiver_id,
        type=type,
        payload=payload,
        app_id=app_id,
        sender_id=sender_id,
        channel=channel,
    )
    delivered = broadcaster.push(
        notification.receiver_id, serialize_notification_event(notification)
    )
    logger.info(
        "Notification %s stored for %s (delivered=%s)",
        notification.id,
        notification.receiver_id,
        delivered,
    )
    return DeliveryResult(notification=notification, delivered=delivered)
