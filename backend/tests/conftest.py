"""Shared fixtures: every test gets its own app and stores."""
import pytest
from httpx import ASGITransport, AsyncClient

from catalog_service.config import Settings
from catalog_service.main import create_app
from catalog_service.storage import ContentStore, LibraryStore


def make_settings(**overrides) -> Settings:
    values = {"env": "development", "log_colors": False, "log_level": "WARNING"}
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def library_store() -> LibraryStore:
    return LibraryStore()


@pytest.fixture
def content_store() -> ContentStore:
    return ContentStore()


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def gql(client):
    """POST a GraphQL operation and return the decoded response body."""
    async def run(query: str, variables: dict = None, path: str = "/graphql") -> dict:
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = await client.post(path, json=payload)
        assert response.status_code == 200
        return response.json()

    return run
