"""SQLAlchemy model for persisted notifications."""

from uuid import uuid4

from sqlalchemy import JSON, Boolean, Column, DateTime, Index, String

from notifyhub.infrastructure.database import Base


def _new_notification_id() -> str:
    return uuid4().hex


class NotificationModel(Base):
    """Database representation for receiver notifications."""

    __tablename__ = "notification"

    id = Column(String(32), primary_key=True, default=_new_notification_id)
    receiver_id = Column(String(255), nullable=False, index=True)
    type = Column(String(100), nullable=False)
    payload = Column(JSON, nullable=False, default=dict)
    read = Column(Boolean, nullable=False, default=False)
    app_id = Column(String(255), nullable=True, index=True)
    sender_id = Column(String(255), nullable=True)
    channel = Column(String(100), nullable=False, default="default")
    created_at = Column(DateTime(), nullable=False)
    updated_at = Column(DateTime(), nullable=False)


# Lookup paths for the receiver timeline, unread counts and tenant-scoped listing.
Index(
    "ix_notification_receiver_created",
    NotificationModel.receiver_id,
    NotificationModel.created_at.desc(),
)
Index("ix_notification_receiver_read", NotificationModel.receiver_id, NotificationModel.read)
Index(
    "ix_notification_app_receiver_created",
    NotificationModel.app_id,
    NotificationModel.receiver_id,
    NotificationModel.created_at.desc(),
)


__all__ = ["NotificationModel"]
