"""
Application-level tests — health, diagnostic headers, unknown routes and
the test-environment reset endpoint.
"""
import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(async_client: AsyncClient):
    resp = await async_client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_response_timing_headers(async_client: AsyncClient):
    """Every response includes X-Response-Time-Ms and X-Query-Count."""
    resp = await async_client.get("/health")
    assert "x-response-time-ms" in resp.headers
    assert "x-query-count" in resp.headers


@pytest.mark.asyncio
async def test_query_count_header_counts_blog_list_statements(async_client: AsyncClient, root_headers: dict):
    # Only ownerless blogs: selectinload has no user ids to fetch.
    resp = await async_client.get("/api/blogs")
    assert resp.headers["x-query-count"] == "1"

    await async_client.post("/api/blogs", headers=root_headers, json={
        "title": "Owned",
        "url": "https://example.com/owned",
    })

    # Blog SELECT plus the selectinload of owners.
    resp = await async_client.get("/api/blogs")
    assert resp.headers["x-query-count"] == "2"


@pytest.mark.asyncio
async def test_query_count_header_is_zero_without_database(async_client: AsyncClient):
    resp = await async_client.get("/health")
    assert resp.headers["x-query-count"] == "0"


@pytest.mark.asyncio
async def test_unknown_endpoint(async_client: AsyncClient):
    resp = await async_client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"error": "unknown endpoint"}


@pytest.mark.asyncio
async def test_malformed_json_body_returns_400(async_client: AsyncClient, root_headers: dict):
    resp = await async_client.post(
        "/api/blogs",
        content=b"{not json",
        headers={**root_headers, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


@pytest.mark.asyncio
async def test_testing_reset_empties_database(async_client: AsyncClient):
    resp = await async_client.post("/api/testing/reset")
    assert resp.status_code == 204

    assert (await async_client.get("/api/blogs")).json() == []
    assert (await async_client.get("/api/users")).json() == []
