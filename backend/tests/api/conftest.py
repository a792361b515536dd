"""API test fixtures — FastAPI test client over an in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - auth_headers(identity) yields a valid bearer header for that identity
"""

import pytest
from httpx import ASGITransport, AsyncClient

from task_manager.infrastructure.auth import create_access_token
from task_manager.infrastructure.database import get_db, DatabaseSessionManager
import task_manager.infrastructure.database as db_module
from task_manager.main import app


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
def auth_headers():
    def _headers(identity: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_access_token(identity)}"}
    return _headers
