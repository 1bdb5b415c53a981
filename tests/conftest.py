"""Shared fixtures for the notification service tests."""

from __future__ import annotations

from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from notifyhub.config import Settings
from notifyhub.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(database_url=f"sqlite:///{tmp_path / 'notifications.db'}")


@pytest.fixture
def db_session(settings: Settings):
    """Yield a session bound to a fresh SQLite database."""

    engine = build_engine(settings.database_url)
    initialize_database(engine)
    session = build_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def app(settings: Settings):
    from main import create_app

    return create_app(settings)


@pytest.fixture
def client(app):
    """Return a test client with the application lifespan running."""

    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client
