"""Use case for reading a receiver's notification history."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from notifyhub.domain.entities import Notification
from notifyhub.infrastructure.repositories import NotificationRepository

from .validators import ensure_app_id


def list_notifications(
    session: Session,
    receiver_id: str,
    *,
    app_id: str | None,
    unread_only: bool = False,
    type: str | None = None,
    channel: str | None = None,
    limit: int = 50,
    skip: int = 0,
) -> Sequence[Notification]:
    """Return notifications for ``receiver_id`` within ``app_id``, newest first."""

    scoped_app_id = ensure_app_id(app_id)
    return NotificationRepository(session).list_for_receiver(
        receiver_id,
        scoped_app_id,
        unread_only=unread_only,
        type=type,
        channel=channel,
        limit=limit,
        skip=skip,
    )
