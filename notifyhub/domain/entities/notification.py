"""Domain entity representing a receiver notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Union

DEFAULT_CHANNEL = "default"

# Opaque structured data carried verbatim through the store and the live push.
JSONValue = Union[str, int, float, bool, None, List[Any], Dict[str, Any]]
JSONPayload = Dict[str, JSONValue]


@dataclass
class Notification:
    """Message addressed to a receiver (user, shop, team...).

    ``receiver_id`` and ``app_id`` are addressing metadata; ``read`` only ever
    moves from ``False`` to ``True``.
    """

    id: str | None
    receiver_id: str
    type: str
    payload: JSONPayload = field(default_factory=dict)
    read: bool = False
    app_id: str | None = None
    sender_id: str | None = None
    channel: str = DEFAULT_CHANNEL
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["DEFAULT_CHANNEL", "JSONPayload", "JSONValue", "Notification"]
