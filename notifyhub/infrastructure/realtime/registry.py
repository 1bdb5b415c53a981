"""Process-local table of live sessions grouped by receiver."""

from __future__ import annotations

import logging
from typing import Dict, Set

from .session import LiveSession

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Track which live sessions are subscribed to each receiver.

    A receiver's set is the broadcast group used by the fan-out. Sets are
    created on first subscribe and dropped as soon as they become empty, so a
    receiver is online exactly when it has an entry. None of the methods
    awaits, which keeps every mutation atomic with respect to other handlers
    running on the same event loop.
    """

    def __init__(self) -> None:
        self._connections: Dict[str, Set[LiveSession]] = {}

    def subscribe(self, receiver_id: str | None, session: LiveSession) -> bool:
        """Join ``session`` to the group of ``receiver_id``.

        Returns ``False`` without touching the table when ``receiver_id`` is
        empty so the caller can report a protocol error to the client.
        """

        if not receiver_id:
            return False
        self._connections.setdefault(receiver_id, set()).add(session)
        logger.info("Session %s subscribed to %s", session.session_id, receiver_id)
        return True

    def unsubscribe(self, receiver_id: str | None, session: LiveSession) -> None:
        """Remove ``session`` from the group of ``receiver_id`` if present."""

        if not receiver_id:
            return
        sessions = self._connections.get(receiver_id)
        if sessions is None:
            return
        sessions.discard(session)
        if not sessions:
            self._connections.pop(receiver_id, None)
        logger.info("Session %s unsubscribed from %s", session.session_id, receiver_id)

    def on_session_end(self, session: LiveSession) -> list[str]:
        """Drop ``session`` from every group and return the receivers it left."""

        left: list[str] = []
        for receiver_id, sessions in list(self._connections.items()):
            if session not in sessions:
                continue
            sessions.discard(session)
            left.append(receiver_id)
            if not sessions:
                del self._connections[receiver_id]
        return left

    def is_online(self, receiver_id: str) -> bool:
        """Return whether ``receiver_id`` has at least one live session."""

        return bool(self._connections.get(receiver_id))

    def sessions_for(self, receiver_id: str) -> tuple[LiveSession, ...]:
        """Return a snapshot of the sessions subscribed to ``receiver_id``."""

        return tuple(self._connections.get(receiver_id, ()))


__all__ = ["ConnectionRegistry"]
