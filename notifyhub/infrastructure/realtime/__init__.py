"""Realtime delivery helpers: live sessions, presence and fan-out."""

from .broadcaster import NotificationBroadcaster, serialize_notification_event
from .events import NotificationEvent
from .hub import RealtimeHub
from .registry import ConnectionRegistry
from .session import LiveSession

__all__ = [
    "ConnectionRegistry",
    "LiveSession",
    "NotificationBroadcaster",
    "NotificationEvent",
    "RealtimeHub",
    "serialize_notification_event",
]
