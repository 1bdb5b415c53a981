"""Errors raised by the notification use cases."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for notification domain errors."""


class ValidationError(NotificationError, ValueError):
    """A required field is missing or empty."""


class NotFoundError(NotificationError, LookupError):
    """The requested notification does not exist."""


__all__ = ["NotificationError", "NotFoundError", "ValidationError"]
