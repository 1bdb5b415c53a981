"""Pydantic schemas used by the API layer."""

from .notification import (
    MarkAllReadResult,
    NotificationCreate,
    NotificationCreated,
    NotificationHistory,
    NotificationMarkedRead,
    NotificationRead,
)

__all__ = [
    "MarkAllReadResult",
    "NotificationCreate",
    "NotificationCreated",
    "NotificationHistory",
    "NotificationMarkedRead",
    "NotificationRead",
]
