"""
Test Configuration and Fixtures

This module provides:
- Database setup and cleanup on a throwaway SQLite file (aiosqlite driver)
- Dependency injection wiring shared with production (WIRE_MODULES)
- An async HTTP client bound to the real FastAPI app

Architecture:
- Unit tests (test/**/unit/): Override fixtures with no-ops in their own conftest.py
- Integration tests: Use a real schema, recreated for every test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time by src.platform.config.core_setting
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    # One database file per process, so pytest-xdist workers never share one
    test_db_dir = Path(tempfile.mkdtemp(prefix='hotels_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db_dir / "test.db"}'
    os.environ['SECRET_KEY'] = 'hotels-test-secret-key-with-32-plus-bytes'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402

from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.database.orm_db_setting import (  # noqa: E402
    create_db_and_tables,
    dispose_engines,
    drop_db_and_tables,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.append('clean_database')


# =============================================================================
# Dependency Injection
# =============================================================================
@pytest.fixture(autouse=True, scope='session')
def wire_container() -> Generator[None, None, None]:
    # httpx's ASGITransport does not run the app lifespan, so wire here
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


# =============================================================================
# Integration Test Fixtures
# =============================================================================
@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await create_db_and_tables()
    yield
    await drop_db_and_tables()
    # Engines are bound to this test's event loop
    await dispose_engines()


@pytest.fixture(scope='function')
async def client() -> AsyncGenerator[AsyncClient, None]:
    from test.test_main import app

    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as ac:
        yield ac
