"""Domain entities exposed by the application."""

from .delivery import DeliveryResult
from .notification import DEFAULT_CHANNEL, JSONPayload, JSONValue, Notification

__all__ = [
    "DEFAULT_CHANNEL",
    "DeliveryResult",
    "JSONPayload",
    "JSONValue",
    "Notification",
]
