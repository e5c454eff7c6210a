"""
Test Configuration and Fixtures

This module provides:
- A throwaway SQLite database (via aiosqlite) per test session and xdist worker
- The HTTP test client running the full app with DI wiring
- Seed fixtures for users, events and bearer tokens

Architecture:
- Unit tests (@pytest.mark.unit): mocked repositories, no database
- Integration tests: real SQL through the same repositories and routers
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL and TEST_LOG_DIR have to be
# in place before any src module is loaded
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    db_dir = Path(tempfile.mkdtemp(prefix='event_registration_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / f"test_{worker_id}.db"}'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SECRET_KEY', 'test_secret_key')


_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.platform.database.orm_db_setting import (  # noqa: E402
    AsyncEngineManager,
    Base,
    Database,
    create_db_and_tables,
)
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel  # noqa: E402, F401
from src.service.registration.driven_adapter.model.attendee_model import (  # noqa: E402, F401
    AttendeeModel,
)
from src.service.shared_kernel.domain.entity.event_entity import EventEntity  # noqa: E402
from src.service.shared_kernel.domain.entity.user_entity import UserEntity  # noqa: E402
from src.service.shared_kernel.domain.enum.user_role import UserRole  # noqa: E402
from test.shared.utils import (  # noqa: E402
    clear_all_tables,
    create_test_engine,
    insert_event,
    insert_user,
)
from test.util_constant import (  # noqa: E402
    ADMIN_NAME,
    ANOTHER_USER_NAME,
    DEFAULT_EVENT_TITLE,
    REGULAR_USER_NAME,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    return bool(markexpr) and 'unit' in str(markexpr) and 'not unit' not in str(markexpr)


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    asyncio.run(_setup_test_database())


async def _setup_test_database() -> None:
    engine = create_test_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await create_db_and_tables(engine)
    finally:
        await engine.dispose()


def _run(coro: Any) -> Any:
    """Run a coroutine against a short-lived engine from synchronous fixtures."""

    async def _with_engine() -> Any:
        engine = create_test_engine()
        try:
            return await coro(engine)
        finally:
            await engine.dispose()

    return asyncio.run(_with_engine())


# =============================================================================
# HTTP Fixtures (synchronous tests)
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def clean_database() -> None:
    _run(clear_all_tables)


@pytest.fixture
def admin_user(clean_database: None) -> UserEntity:
    return _run(lambda engine: insert_user(engine, name=ADMIN_NAME, role=UserRole.ADMIN))


@pytest.fixture
def regular_user(clean_database: None) -> UserEntity:
    return _run(lambda engine: insert_user(engine, name=REGULAR_USER_NAME))


@pytest.fixture
def another_user(clean_database: None) -> UserEntity:
    return _run(lambda engine: insert_user(engine, name=ANOTHER_USER_NAME))


@pytest.fixture
def event(clean_database: None) -> EventEntity:
    return _run(lambda engine: insert_event(engine, title=DEFAULT_EVENT_TITLE))


# =============================================================================
# Repository Fixtures (async tests)
# =============================================================================
@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """A Database bound to the running test loop, with its own engine."""
    engine_manager = AsyncEngineManager()
    yield Database(engine_manager=engine_manager)
    await engine_manager.dispose()
