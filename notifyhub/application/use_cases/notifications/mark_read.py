"""Use case for marking a single notification as read."""

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Notification
from notifyhub.domain.exceptions import NotFoundError
from notifyhub.infrastructure.repositories import NotificationRepository


def mark_notification_read(session: Session, notification_id: str) -> Notification:
    """Flag the notification as read. Repeating the call has no further effect."""

    notification = NotificationRepository(session).mark_read(notification_id)
    if notification is None:
        raise NotFoundError("Notification not found")
    return notification
