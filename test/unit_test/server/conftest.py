from typing import AsyncGenerator, Dict

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from markertrack.server.core.security import create_access_token


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_maker) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client whose requests use the test database."""
    from markertrack.core.database import get_session
    from markertrack.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def auth_headers() -> Dict[str, str]:
    """Bearer header carrying a valid token that belongs to no stored user."""
    return {"Authorization": f"Bearer {create_access_token('reader@example.com')}"}


@pytest_asyncio.fixture
async def register(client):
    """Register a user through the API and return the response body."""

    async def _register(email: str, first_name: str = "Ada", last_name: str = "Lovelace") -> Dict:
        response = await client.post(
            "/api/user",
            json={"email": email, "firstName": first_name, "lastName": last_name},
        )
        assert response.status_code == 200, response.text
        return response.json()

    return _register
