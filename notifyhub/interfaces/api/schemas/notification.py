"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NotificationCreate(CamelModel):
    """Payload used to create and deliver a notification.

    ``receiverId`` and ``type`` are checked by the use case so that a missing
    value is reported as a 400 with the field names.
    """

    receiver_id: str | None = Field(default=None, description="Receiver identifier")
    type: str | None = Field(default=None, description="Category such as order, chat or alert")
    payload: dict[str, JsonValue] | None = Field(
        default=None, description="Arbitrary notification content"
    )
    app_id: str | None = Field(default=None, description="Application identifier")
    sender_id: str | None = Field(default=None, description="Sender identifier")
    channel: str | None = Field(default=None, description="Channel used for filtering")


class NotificationRead(CamelModel):
    """Representation of a stored notification."""

    id: str
    receiver_id: str
    type: str
    payload: dict[str, JsonValue] = Field(default_factory=dict)
    read: bool = False
    app_id: str | None = None
    sender_id: str | None = None
    channel: str
    created_at: datetime
    updated_at: datetime


class NotificationCreated(CamelModel):
    success: bool = True
    notification: NotificationRead
    delivered: bool


class NotificationHistory(CamelModel):
    """Page of notifications plus the receiver's counters and presence."""

    notifications: list[NotificationRead]
    total: int
    unread_count: int
    is_online: bool


class NotificationMarkedRead(CamelModel):
    success: bool = True
    notification: NotificationRead


class MarkAllReadResult(CamelModel):
    success: bool = True
    modified_count: int


__all__ = [
    "CamelModel",
    "MarkAllReadResult",
    "NotificationCreate",
    "NotificationCreated",
    "NotificationHistory",
    "NotificationMarkedRead",
    "NotificationRead",
]
