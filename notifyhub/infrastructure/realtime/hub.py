"""Lifecycle owner for the realtime registry and broadcaster."""

from __future__ import annotations

import asyncio
import logging

from .broadcaster import NotificationBroadcaster
from .registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class RealtimeHub:
    """Bundle the presence registry with the broadcaster that reads it.

    One hub is created per application. ``start`` runs on server startup and
    binds the serving event loop; ``shutdown`` cancels pending pushes and
    clears the registry so nothing outlives the server.
    """

    def __init__(self, registry: ConnectionRegistry | None = None) -> None:
        self.registry = registry if registry is not None else ConnectionRegistry()
        self.broadcaster = NotificationBroadcaster(self.registry)

    async def start(self) -> None:
        self.broadcaster.bind(asyncio.get_running_loop())
        logger.info("Realtime hub started")

    async def shutdown(self) -> None:
        await self.broadcaster.aclose()
        self.registry.clear()
        logger.info("Realtime hub stopped")

    def is_online(self, receiver_id: str) -> bool:
        return self.registry.is_online(receiver_id)


__all__ = ["RealtimeHub"]
