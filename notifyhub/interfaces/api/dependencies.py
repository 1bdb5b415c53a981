"""FastAPI dependency utilities."""

import logging
import secrets

from fastapi import Depends, Header, HTTPException, Request, status

from notifyhub.config import Settings
from notifyhub.infrastructure.realtime import NotificationBroadcaster, RealtimeHub

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


def get_realtime_hub(request: Request) -> RealtimeHub:
    """Return the realtime hub owned by the running application."""

    return request.app.state.realtime


def get_broadcaster(hub: RealtimeHub = Depends(get_realtime_hub)) -> NotificationBroadcaster:
    return hub.broadcaster


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    settings: Settings = Depends(get_app_settings),
) -> None:
    """Reject the request unless it carries the configured API key.

    The check is disabled when no ``API_KEY`` is configured.
    """

    expected = settings.api_key
    if not expected:
        return
    if x_api_key is None or not secrets.compare_digest(x_api_key, expected):
        logger.warning("Rejected request with invalid or missing API key")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing API key",
        )
