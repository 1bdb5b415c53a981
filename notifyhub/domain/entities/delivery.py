"""Outcome of persisting a notification and attempting its live push."""

from __future__ import annotations

from dataclasses import dataclass

from .notification import Notification


@dataclass(frozen=True)
class DeliveryResult:
    """Persisted ``notification`` plus whether a live push was attempted.

    ``delivered`` is ``True`` when at least one live session was registered for
    the receiver at push time. It does not confirm client-side receipt.
    """

    notification: Notification
    delivered: bool


__all__ = ["DeliveryResult"]
