"""Pytest configuration shared by unit, integration and API tests.

This configuration ensures:
1. Every test gets its own SQLite database file (no shared state)
2. API tests run the real application with the database overridden
3. Async tests are marked automatically
"""

import inspect
from collections.abc import Callable, Iterator
from contextlib import ExitStack

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from crud_backbone.core.container import get_database
from crud_backbone.infrastructure.persistence.base import BaseModel
from crud_backbone.infrastructure.persistence.database import Database
from crud_backbone.infrastructure.persistence.models import ApplicationModel

TEST_ACCESS_KEY = "test-access-key-0123456789"


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through FastAPI TestClient")
    config.addinivalue_line("markers", "asyncio: Async test that requires event loop")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


# =============================================================================
# Database fixtures (integration)
# =============================================================================


@pytest.fixture
def database_path(tmp_path) -> str:
    return str(tmp_path / "crud_backbone_test.db")


@pytest_asyncio.fixture
async def database(database_path):
    """Fresh Database on a temporary SQLite file, tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{database_path}")
    await db.create_all()

    yield db

    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def session(database):
    """Session bound to the test database."""
    async with database.get_session() as db_session:
        yield db_session


# =============================================================================
# Application fixtures (API)
# =============================================================================


@pytest.fixture
def seeded_database_path(database_path) -> str:
    """Database file with tables and one registered application.

    Seeded synchronously so the application's own event loop (TestClient
    portal) is the only one that ever touches the async engine.
    """
    engine = create_engine(f"sqlite:///{database_path}")
    BaseModel.metadata.create_all(engine)
    with Session(engine) as db_session:
        db_session.add(ApplicationModel(key=TEST_ACCESS_KEY, label="tests"))
        db_session.commit()
    engine.dispose()
    return database_path


@pytest.fixture
def app_database(seeded_database_path) -> Database:
    return Database(database_url=f"sqlite+aiosqlite:///{seeded_database_path}")


@pytest.fixture
def client_factory(app_database) -> Iterator[Callable[[FastAPI], TestClient]]:
    """Start TestClients for custom applications, all on the test database.

    Usage:
        test_client = client_factory(create_app(controllers=[MyController]))
    """
    with ExitStack() as stack:

        def start(app: FastAPI) -> TestClient:
            app.dependency_overrides[get_database] = lambda: app_database
            stack.callback(app.dependency_overrides.clear)
            return stack.enter_context(
                TestClient(app, raise_server_exceptions=False)
            )

        yield start


@pytest.fixture
def client(client_factory) -> TestClient:
    """TestClient for the default application (ClientController)."""
    from crud_backbone.main import create_app

    return client_factory(create_app())


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {TEST_ACCESS_KEY}"}
