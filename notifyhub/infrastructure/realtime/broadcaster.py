"""Fan-out of notification events to every live session of a receiver."""

from __future__ import annotations

import asyncio
import copy
import logging
from typing import Any, Set

import anyio

from notifyhub.domain.entities import Notification

from .events import NotificationEvent
from .registry import ConnectionRegistry
from .session import LiveSession

logger = logging.getLogger(__name__)

NOTIFICATION_MESSAGE = "notification"


class NotificationBroadcaster:
    """Push events to the broadcast group of a receiver.

    ``push`` answers immediately and never waits for the sends: the broadcast
    itself is scheduled on the event loop the broadcaster was bound to at
    server start. Offline receivers are skipped, nothing is queued or retried.
    """

    def __init__(self, registry: ConnectionRegistry) -> None:
        self._registry = registry
        self._loop: asyncio.AbstractEventLoop | None = None
        self._pending: Set[asyncio.Task[None]] = set()

    @property
    def started(self) -> bool:
        return self._loop is not None and not self._loop.is_closed()

    def bind(self, loop: asyncio.AbstractEventLoop) -> None:
        """Attach the broadcaster to the event loop that serves the websockets."""

        self._loop = loop

    def push(self, receiver_id: str, event: dict[str, Any]) -> bool:
        """Broadcast ``event`` to ``receiver_id`` and report whether it was online.

        Safe to call from the event loop or from a worker thread running a
        synchronous request handler.
        """

        if not self.started:
            logger.error("Realtime transport not initialized; push to %s skipped", receiver_id)
            return False
        if not self._registry.is_online(receiver_id):
            logger.debug("Receiver %s offline; push skipped", receiver_id)
            return False

        message = copy.deepcopy(event)
        loop = self._loop
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is loop:
            self._spawn(receiver_id, message)
        else:
            loop.call_soon_threadsafe(self._spawn, receiver_id, message)
        logger.info("Notification %s pushed to %s", message.get("type"), receiver_id)
        return True

    async def flush(self) -> None:
        """Wait until every scheduled broadcast has finished."""

        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel in-flight broadcasts and detach from the event loop."""

        pending = list(self._pending)
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        self._pending.clear()
        self._loop = None

    def _spawn(self, receiver_id: str, message: dict[str, Any]) -> None:
        if self._loop is None:
            return
        task = self._loop.create_task(self._broadcast(receiver_id, message))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _broadcast(self, receiver_id: str, message: dict[str, Any]) -> None:
        sessions = self._registry.sessions_for(receiver_id)
        async with anyio.create_task_group() as task_group:
            for session in sessions:
                task_group.start_soon(self._send, receiver_id, session, message)

    async def _send(
        self, receiver_id: str, session: LiveSession, message: dict[str, Any]
    ) -> None:
        try:
            await session.send(NOTIFICATION_MESSAGE, message)
        except Exception:
            logger.warning(
                "Dropping session %s after failed push to %s",
                session.session_id,
                receiver_id,
                exc_info=True,
            )
            self._registry.on_session_end(session)


def serialize_notification_event(notification: Notification) -> dict[str, Any]:
    """Return the pushed event body for ``notification``.

    Addressing fields (``receiverId``, ``appId``) are left out.
    """

    return NotificationEvent(
        id=notification.id,
        type=notification.type,
        payload=notification.payload or {},
        channel=notification.channel,
        sender_id=notification.sender_id,
        created_at=notification.created_at,
    ).model_dump(mode="json", by_alias=True)


__all__ = ["NOTIFICATION_MESSAGE", "NotificationBroadcaster", "serialize_notification_event"]
