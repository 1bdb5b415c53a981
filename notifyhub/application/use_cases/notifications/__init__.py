"""Use cases for storing, reading and delivering notifications."""

from .count_notifications import count_notifications
from .create_and_deliver import create_and_deliver
from .create_notification import create_notification
from .list_notifications import list_notifications
from .mark_all_read import mark_all_notifications_read
from .mark_read import mark_notification_read

__all__ = [
    "count_notifications",
    "create_and_deliver",
    "create_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
]
