"""Live websocket session wrapper."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from fastapi import WebSocket


class LiveSession:
    """One active realtime connection identified by an opaque ``session_id``.

    Sessions hash by identity so the same websocket can sit in several
    receiver groups at once.
    """

    def __init__(self, websocket: WebSocket, session_id: str | None = None) -> None:
        self.websocket = websocket
        self.session_id = session_id or uuid4().hex

    async def send(self, message_type: str, data: Any = None) -> None:
        """Send a ``{"type", "data"}`` frame to the client."""

        frame: dict[str, Any] = {"type": message_type}
        if data is not None:
            frame["data"] = data
        await self.websocket.send_json(frame)

    def __repr__(self) -> str:
        return f"LiveSession({self.session_id!r})"


__all__ = ["LiveSession"]
