"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator
from datetime import timezone, tzinfo

import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

logger = logging.getLogger(__name__)

TIMEZONE_KEY = "timezone"


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


def build_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine for ``database_url``."""

    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        # Sessions are opened in worker threads by sync request handlers.
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def build_session_factory(
    engine: Engine, tz: tzinfo = timezone.utc
) -> sessionmaker[Session]:
    """Return a session factory bound to ``engine``.

    Sessions carry the application timezone in ``Session.info`` so that
    repositories stamp and localize timestamps in it.
    """

    return sessionmaker(
        autocommit=False, autoflush=False, bind=engine, info={TIMEZONE_KEY: tz}
    )


def session_timezone(session: Session) -> tzinfo:
    """Return the application timezone attached to ``session``."""

    return session.info.get(TIMEZONE_KEY, timezone.utc)


def initialize_database(engine: Engine) -> None:
    """Ensure all ORM models have corresponding database tables."""

    from notifyhub.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database schema ready on %s", engine.url.render_as_string(hide_password=True))


def get_db(request: Request) -> Generator[Session, None, None]:
    """Yield a database session from the application's factory and close it afterwards."""

    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


__all__ = [
    "Base",
    "build_engine",
    "TIMEZONE_KEY",
    "build_session_factory",
    "get_db",
    "initialize_database",
    "session_timezone",
]
