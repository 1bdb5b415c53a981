"""Common validation helpers for notification use cases."""

from notifyhub.domain.exceptions import ValidationError


def ensure_receiver_and_type(receiver_id: str | None, type: str | None) -> None:
    """Raise ``ValidationError`` unless both fields are non-empty."""

    if not receiver_id or not type:
        raise ValidationError("Missing required fields: receiverId, type")


def ensure_app_id(app_id: str | None) -> str:
    """Return ``app_id`` or raise ``ValidationError`` when it is missing."""

    if not app_id:
        raise ValidationError("Missing required query parameter: appId")
    return app_id
