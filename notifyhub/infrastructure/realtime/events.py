"""Body of the ``notification`` message pushed to live sessions."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, JsonValue
from pydantic.alias_generators import to_camel


class NotificationEvent(BaseModel):
    """Projection of a stored notification without its addressing fields.

    Serialized through pydantic so timestamps read the same as in the HTTP
    responses.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None
    type: str
    payload: dict[str, JsonValue] = Field(default_factory=dict)
    channel: str
    sender_id: str | None = None
    created_at: datetime | None = None


__all__ = ["NotificationEvent"]
