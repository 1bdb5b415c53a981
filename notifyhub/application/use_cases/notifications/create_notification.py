"""Use case for persisting a new notification."""

from sqlalchemy.orm import Session

from notifyhub.domain.entities import DEFAULT_CHANNEL, JSONPayload, Notification
from notifyhub.infrastructure.repositories import NotificationRepository

from .validators import ensure_receiver_and_type


def create_notification(
    session: Session,
    *,
    receiver_id: str | None,
    type: str | None,
    payload: JSONPayload | None = None,
    app_id: str | None = None,
    sender_id: str | None = None,
    channel: str | None = None,
) -> Notification:
    """Store an unread notification for ``receiver_id``."""

    ensure_receiver_and_type(receiver_id, type)

    notification = Notification(
        id=None,
        receiver_id=receiver_id,
        type=type,
        payload=payload or {},
        read=False,
        app_id=app_id,
        sender_id=sender_id,
        channel=channel or DEFAULT_CHANNEL,
        created_at=None,
        updated_at=None,
    )
    return NotificationRepository(session).create(notification)
