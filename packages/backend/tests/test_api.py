"""
HTTP tests for the FastAPI application
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hackernews.api.app import create_app
from hackernews.database.connection import init_database, reset_database


@pytest_asyncio.fixture
async def client(engine) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client talking to an app bound to the test database."""
    init_database(engine=engine, force_reinit=True)
    app = create_app()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    reset_database()


async def graphql(client: AsyncClient, query: str, variables: dict | None = None) -> dict:
    response = await client.post("/graphql", json={"query": query, "variables": variables or {}})
    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
@pytest.mark.integration
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": "0.1.0"}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_writes_persist_across_requests(client):
    created = await graphql(
        client,
        "mutation Post($url: String!, $description: String!) {"
        " postLink(url: $url, description: $description) { id } }",
        {"url": "https://graphql.org", "description": "GraphQL"},
    )
    link_id = created["data"]["postLink"]["id"]

    commented = await graphql(
        client,
        "mutation Comment($linkId: ID!) {"
        " postCommentOnLink(linkId: $linkId, body: \"nice\") { link { id } } }",
        {"linkId": link_id},
    )
    assert commented["data"]["postCommentOnLink"]["link"]["id"] == link_id

    feed = await graphql(client, '{ feed(filterNeedle: "Graph") { id comments { body } } }')
    assert feed == {"data": {"feed": [{"id": link_id, "comments": [{"body": "nice"}]}]}}


@pytest.mark.asyncio
@pytest.mark.integration
async def test_domain_errors_in_error_envelope(client):
    result = await graphql(
        client, 'mutation { postCommentOnLink(linkId: "999", body: "x") { id } }'
    )

    assert result["data"] is None
    assert result["errors"][0]["message"] == (
        "Cannot post comment on non-existing link with id '999'."
    )
    assert result["errors"][0]["path"] == ["postCommentOnLink"]


@pytest.mark.asyncio
@pytest.mark.integration
async def test_invalid_documents_are_rejected_by_the_engine(client):
    response = await client.post("/graphql", json={"query": "{ feed(take: \"ten\") { id } }"})
    result = response.json()

    assert result.get("data") is None
    assert "Int cannot represent" in result["errors"][0]["message"]
