"""HTTP tests: health, root, reset and GraphQL transport options."""
import warnings

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_service.graphql import build_library_schema
from catalog_service.main import create_app
from conftest import make_settings


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient):
    """Test health check endpoint."""
    response = await client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"


@pytest.mark.asyncio
async def test_root(client: AsyncClient):
    """Test root endpoint."""
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["graphql"] == "/graphql"
    assert data["content_graphql"] == "/content/graphql"
    assert "version" in data


@pytest.mark.asyncio
async def test_graphiql_served(client: AsyncClient):
    response = await client.get("/graphql", headers={"Accept": "text/html"})
    assert response.status_code == 200
    assert "graphiql" in response.text.lower()


@pytest.mark.asyncio
async def test_reset_in_development(client: AsyncClient, gql):
    await gql('mutation { deleteBook(id: "1") }')
    await gql('mutation { deleteUser(id: "1") { success } }', path="/content/graphql")

    response = await client.post("/reset")
    assert response.status_code == 200
    assert response.json()["message"] == "Reset completed."

    body = await gql("{ books { id } }")
    assert [b["id"] for b in body["data"]["books"]] == ["1", "2", "3"]
    body = await gql("{ users { id } }", path="/content/graphql")
    assert len(body["data"]["users"]) == 2


@pytest.mark.asyncio
async def test_reset_forbidden_in_production():
    app = create_app(make_settings(env="production"))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post("/reset")
    assert response.status_code == 403
    assert response.json()["detail"] == "/reset is disabled in production."


@pytest.mark.asyncio
async def test_introspection_can_be_disabled():
    app = create_app(make_settings(introspection=False))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post("/graphql", json={"query": "{ __schema { queryType { name } } }"})
        body = response.json()
        assert body["errors"]

        response = await ac.post("/graphql", json={"query": "{ books { id } }"})
        assert len(response.json()["data"]["books"]) == 3


@pytest.mark.asyncio
async def test_introspection_enabled_by_default(gql):
    body = await gql("{ __schema { queryType { name } mutationType { name } } }")
    assert body["data"]["__schema"] == {"queryType": {"name": "Query"}, "mutationType": {"name": "Mutation"}}


@pytest.mark.asyncio
async def test_apps_do_not_share_stores():
    first = create_app(make_settings())
    second = create_app(make_settings())
    first.state.library_store.delete_book("1")
    assert len(second.state.library_store.list_books()) == 3


@pytest.mark.asyncio
async def test_empty_catalog_without_seed():
    app = create_app(make_settings(seed_data=False))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.post("/graphql", json={"query": "{ books { id } users { id } }"})
    assert response.json()["data"] == {"books": [], "users": []}


def test_disabled_introspection_schema_builds_without_deprecation_warnings():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        schema = build_library_schema(introspection=False)
        result = schema.execute_sync("{ __schema { queryType { name } } }")
    assert result.errors
    assert not [w for w in caught if "extension" in str(w.message).lower()]
