"""
Test Configuration and Fixtures

This module provides:
- A throw-away SQLite database (aiosqlite) created once per session
- Table cleanup between integration tests
- The session-scoped TestClient and user/event helpers

Architecture:
- Unit tests (@pytest.mark.unit): in-memory fakes and mocks, no database
- Integration tests: real SQLAlchemy adapters against SQLite, cleaned per test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_path = Path(tempfile.gettempdir()) / f'event_ticketing_test_{worker_id}.db'
    os.environ['TEST_DB_PATH'] = str(db_path)
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_path}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ['ENABLE_REMINDER_SCHEDULER'] = 'false'
    os.environ.setdefault('SECRET_KEY', 'test_secret_key')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import delete  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402

from src.platform.database.orm_db_setting import Base  # noqa: E402
import src.service.ticketing.driven_adapter.model  # noqa: E402,F401
from test.shared.utils import create_user, login_user  # noqa: E402
from test.util_constant import (  # noqa: E402
    ANOTHER_USER_EMAIL,
    ANOTHER_USER_NAME,
    DEFAULT_PASSWORD,
    TEST_USER_EMAIL,
    TEST_USER_NAME,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_sessionstart(session: pytest.Session) -> None:
    import asyncio

    asyncio.run(_setup_test_database())


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            # First among function fixtures, so data fixtures run on a clean database
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
async def _setup_test_database() -> None:
    Path(os.environ['TEST_DB_PATH']).unlink(missing_ok=True)

    engine = create_async_engine(os.environ['DATABASE_URL'])
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()


async def _clean_all_tables() -> None:
    engine = create_async_engine(os.environ['DATABASE_URL'])
    try:
        async with engine.begin() as conn:
            # Children first
            for table in reversed(Base.metadata.sorted_tables):
                await conn.execute(delete(table))
    finally:
        await engine.dispose()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def clear_client_cookies(request: pytest.FixtureRequest) -> Generator[None, None, None]:
    # Skip for unit tests - they don't use the HTTP client
    if 'unit' in [m.name for m in request.node.iter_markers()]:
        yield
        return
    client = request.getfixturevalue('client')
    client.cookies.clear()
    yield
    client.cookies.clear()


# =============================================================================
# Function-scoped data fixtures (tables are wiped before every test)
# =============================================================================
@pytest.fixture
def test_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, TEST_USER_EMAIL, DEFAULT_PASSWORD, TEST_USER_NAME)


@pytest.fixture
def another_user(client: TestClient) -> dict[str, Any]:
    return create_user(client, ANOTHER_USER_EMAIL, DEFAULT_PASSWORD, ANOTHER_USER_NAME)


@pytest.fixture
def auth_headers(client: TestClient, test_user: dict[str, Any]) -> dict[str, str]:
    token = login_user(client, TEST_USER_EMAIL, DEFAULT_PASSWORD).json()['token']
    client.cookies.clear()
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def another_auth_headers(client: TestClient, another_user: dict[str, Any]) -> dict[str, str]:
    token = login_user(client, ANOTHER_USER_EMAIL, DEFAULT_PASSWORD).json()['token']
    client.cookies.clear()
    return {'Authorization': f'Bearer {token}'}
