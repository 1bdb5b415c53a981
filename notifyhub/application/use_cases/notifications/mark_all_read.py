"""Use case for marking a receiver's notifications as read in bulk."""

from sqlalchemy.orm import Session

from notifyhub.infrastructure.repositories import NotificationRepository

from .validators import ensure_app_id


def mark_all_notifications_read(
    session: Session,
    receiver_id: str,
    *,
    app_id: str | None,
    type: str | None = None,
    channel: str | None = None,
) -> int:
    """Mark unread notifications of ``receiver_id`` in ``app_id`` as read.

    Optional ``type`` and ``channel`` narrow the subset. Returns the number of
    notifications that changed.
    """

    scoped_app_id = ensure_app_id(app_id)
    return NotificationRepository(session).mark_all_read(
        receiver_id, scoped_app_id, type=type, channel=channel
    )
