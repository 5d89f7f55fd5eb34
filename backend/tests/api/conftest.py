"""API test fixtures — FastAPI test clients over ASGITransport.

Invariants:
    - client: full stack, get_db overridden to the per-test SQLite session factory
    - mock_service / mocked_client: routes exercised against an AsyncMock service
    - db_manager patched so readiness probes see the test engine
    - dependency_overrides cleared after every test
"""

import pytest
from unittest.mock import AsyncMock
from httpx import ASGITransport, AsyncClient

from user_api.api.routes.users import get_user_service
from user_api.infrastructure.database import get_db, DatabaseSessionManager
import user_api.infrastructure.database as db_module
from user_api.main import app
from user_api.services.user_service import UserService


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def mock_service():
    return AsyncMock(spec=UserService)


@pytest.fixture
async def mocked_client(mock_service):
    """FastAPI test client whose routes talk to mock_service."""
    app.dependency_overrides[get_user_service] = lambda: mock_service
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
