import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from notifyhub.config import Settings, get_settings
from notifyhub.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)
from notifyhub.infrastructure.realtime import RealtimeHub
from notifyhub.interfaces.api.routes import register_routes
from notifyhub.utils import resolve_timezone


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema and start the realtime hub; release both on shutdown."""

    initialize_database(app.state.engine)
    await app.state.realtime.start()
    yield
    await app.state.realtime.shutdown()
    app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the notification service application."""

    settings = settings or get_settings()
    app = FastAPI(
        title="Notification API",
        lifespan=lifespan,
        docs_url="/api/swagger",
        openapi_url="/api-docs.json",
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.timezone = resolve_timezone(settings.app_timezone)
    app.state.engine = build_engine(settings.database_url)
    app.state.session_factory = build_session_factory(
        app.state.engine, app.state.timezone
    )
    app.state.realtime = RealtimeHub()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PATCH"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()


if __name__ == "__main__":
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
