"""Use case for counting a receiver's notifications."""

from sqlalchemy.orm import Session

from notifyhub.infrastructure.repositories import NotificationRepository

from .validators import ensure_app_id


def count_notifications(
    session: Session,
    receiver_id: str,
    *,
    app_id: str | None,
    read: bool | None = None,
) -> int:
    """Count notifications in scope; pass ``read=False`` for the unread count."""

    scoped_app_id = ensure_app_id(app_id)
    return NotificationRepository(session).count(receiver_id, scoped_app_id, read=read)
