"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Query, Session

from notifyhub.domain.entities import Notification
from notifyhub.infrastructure.database import session_timezone
from notifyhub.infrastructure.models import NotificationModel
from notifyhub.utils import localize, now_in, to_storage


class NotificationRepository:
    """Provide storage operations for :class:`Notification` objects.

    Every list, count and bulk update is scoped by ``(receiver_id, app_id)``.
    ``app_id`` is matched exactly, so ``None`` only matches rows stored
    without an application. Timestamps are stored in the timezone attached
    to the session and handed back localized to it.
    """

    def __init__(self, session: Session) -> None:
        self.session = session
        self.tz = session_timezone(session)

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        now = self._now()
        model.receiver_id = notification.receiver_id
        model.type = notification.type
        model.payload = notification.payload or {}
        model.read = notification.read
        model.app_id = notification.app_id
        model.sender_id = notification.sender_id
        model.channel = notification.channel
        model.created_at = to_storage(notification.created_at, self.tz) or now
        model.updated_at = to_storage(notification.updated_at, self.tz) or now
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, notification_id: str) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model is not None else None

    def list_for_receiver(
        self,
        receiver_id: str,
        app_id: str | None,
        *,
        unread_only: bool = False,
        type: str | None = None,
        channel: str | None = None,
        limit: int | None = 50,
        skip: int = 0,
    ) -> Sequence[Notification]:
        query = self._scoped_query(receiver_id, app_id, type=type, channel=channel)
        if unread_only:
            query = query.filter(NotificationModel.read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count(
        self, receiver_id: str, app_id: str | None, *, read: bool | None = None
    ) -> int:
        query = self._scoped_query(receiver_id, app_id)
        if read is not None:
            query = query.filter(NotificationModel.read.is_(read))
        return query.count()

    def mark_read(self, notification_id: str) -> Notification | None:
        """Flag one notification as read; already-read rows are left untouched."""

        model = self.session.get(NotificationModel, notification_id)
        if model is None:
            return None
        if not model.read:
            model.read = True
            model.updated_at = self._now()
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def mark_all_read(
        self,
        receiver_id: str,
        app_id: str | None,
        *,
        type: str | None = None,
        channel: str | None = None,
    ) -> int:
        """Flag every unread notification in scope as read and return how many changed."""

        query = self._scoped_query(receiver_id, app_id, type=type, channel=channel)
        modified = query.filter(NotificationModel.read.is_(False)).update(
            {
                NotificationModel.read: True,
                NotificationModel.updated_at: self._now(),
            },
            synchronize_session=False,
        )
        self.session.commit()
        return int(modified or 0)

    def _scoped_query(
        self,
        receiver_id: str,
        app_id: str | None,
        *,
        type: str | None = None,
        channel: str | None = None,
    ) -> Query:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.receiver_id == receiver_id
        )
        if app_id is None:
            query = query.filter(NotificationModel.app_id.is_(None))
        else:
            query = query.filter(NotificationModel.app_id == app_id)
        if type:
            query = query.filter(NotificationModel.type == type)
        if channel:
            query = query.filter(NotificationModel.channel == channel)
        return query

    def _now(self) -> datetime:
        return to_storage(now_in(self.tz), self.tz)

    def _to_entity(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            receiver_id=model.receiver_id,
            type=model.type,
            payload=model.payload or {},
            read=bool(model.read),
            app_id=model.app_id,
            sender_id=model.sender_id,
            channel=model.channel,
            created_at=localize(model.created_at, self.tz),
            updated_at=localize(model.updated_at, self.tz),
        )


__all__ = ["NotificationRepository"]
