"""Liveness endpoint."""

from fastapi import APIRouter, Request

from notifyhub.utils import now_in

router = APIRouter(tags=["health"])


@router.get("/health")
def health(request: Request) -> dict[str, str]:
    return {"status": "ok", "timestamp": now_in(request.app.state.timezone).isoformat()}
