"""Websocket endpoint for live notification delivery."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from notifyhub.infrastructure.realtime import LiveSession, RealtimeHub

router = APIRouter(tags=["realtime"])
logger = logging.getLogger(__name__)


def _receiver_id_from(data: Any) -> Any:
    if isinstance(data, dict):
        return data.get("receiverId")
    return data


async def _handle_message(hub: RealtimeHub, session: LiveSession, message: dict[str, Any]) -> None:
    message_type = message.get("type")
    receiver_id = _receiver_id_from(message.get("data"))

    if message_type == "subscribe":
        if receiver_id and not isinstance(receiver_id, str):
            await session.send("error", {"message": "receiverId must be a string"})
            return
        if not hub.registry.subscribe(receiver_id, session):
            await session.send("error", {"message": "receiverId is required"})
            return
        await session.send(
            "subscribed",
            {"receiverId": receiver_id, "message": "Successfully subscribed"},
        )
    elif message_type == "unsubscribe":
        if isinstance(receiver_id, str):
            hub.registry.unsubscribe(receiver_id, session)
    elif message_type == "ping":
        await session.send("pong")
    else:
        await session.send("error", {"message": f"Unsupported message type: {message_type}"})


@router.websocket("/ws/notifications")
async def notifications_websocket(websocket: WebSocket) -> None:
    """Register the connection as a live session and serve its subscriptions."""

    hub: RealtimeHub = websocket.app.state.realtime
    await websocket.accept()
    session = LiveSession(websocket)
    logger.info("Socket connected: %s", session.session_id)

    try:
        while True:
            try:
                message = await websocket.receive_json()
            except WebSocketDisconnect:
                raise
            except (KeyError, TypeError, ValueError):
                await session.send("error", {"message": "Invalid message"})
                continue

            if not isinstance(message, dict):
                await session.send("error", {"message": "Invalid message"})
                continue

            await _handle_message(hub, session, message)
    except WebSocketDisconnect:
        pass
    finally:
        hub.registry.on_session_end(session)
        logger.info("Socket disconnected: %s", session.session_id)
