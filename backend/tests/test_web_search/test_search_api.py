"""Tests for the /api/search and /health endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.web_search import (
    AnnotatedResult,
    DirectFetchResponse,
    ExtractionStatus,
    SearchResponse,
)
from app.services.web_search import get_query_router
from app.services.web_search.exceptions import (
    QueryValidationError,
    SearchNotConfiguredError,
    UpstreamSearchError,
)


def _search_response() -> SearchResponse:
    return SearchResponse(
        query="tide pools",
        provider="brave",
        organic_results=[
            AnnotatedResult(
                rank=0,
                title="Tide pool",
                url="https://en.wikipedia.org/wiki/Tide_pool",
                snippet="A tide pool is...",
                extracted_content="Tide pools form where...",
                extracted_content_status=ExtractionStatus.SUCCESS,
                extracted_content_status_detail="Content extracted successfully.",
            ),
            AnnotatedResult(
                rank=1,
                title="Jane Doe",
                url="https://www.linkedin.com/in/jane-doe",
                snippet="Marine biologist",
                extracted_content=None,
                extracted_content_status=ExtractionStatus.SKIPPED,
                extracted_content_status_detail="Direct extraction skipped.",
            ),
        ],
    )


@pytest.fixture
def query_router():
    """Mocked QueryRouter injected through dependency overrides."""
    router = MagicMock()
    router.handle = AsyncMock(return_value=_search_response())
    app.dependency_overrides[get_query_router] = lambda: router
    yield router
    app.dependency_overrides.pop(get_query_router, None)


@pytest.fixture
def client(query_router):
    return TestClient(app, raise_server_exceptions=False)


class TestSearchEndpoint:
    def test_search_results(self, client, query_router):
        response = client.get("/api/search", params={"query": "tide pools"})

        assert response.status_code == 200
        data = response.json()
        assert data["query"] == "tide pools"
        assert [r["rank"] for r in data["organic_results"]] == [0, 1]
        assert data["organic_results"][0]["extracted_content_status"] == "success"
        assert data["organic_results"][1]["extracted_content"] is None
        query_router.handle.assert_awaited_once_with("tide pools")

    def test_direct_fetch(self, client, query_router):
        query_router.handle = AsyncMock(
            return_value=DirectFetchResponse(
                source_url="https://example.com/a",
                title="Example",
                snippet="Body...",
                extracted_content="Body",
                extracted_content_status=ExtractionStatus.SUCCESS,
                extracted_content_status_detail="Content extracted successfully.",
            )
        )

        response = client.get("/api/search", params={"query": "url:https://example.com/a"})

        assert response.status_code == 200
        data = response.json()
        assert data["source_url"] == "https://example.com/a"
        assert data["extracted_content"] == "Body"

    def test_validation_error(self, client, query_router):
        query_router.handle = AsyncMock(
            side_effect=QueryValidationError("Invalid URL for direct fetching.")
        )

        response = client.get("/api/search", params={"query": "url:nope"})

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid URL for direct fetching."}

    def test_missing_query_passed_as_none(self, client, query_router):
        query_router.handle = AsyncMock(
            side_effect=QueryValidationError("Missing query parameter")
        )

        response = client.get("/api/search")

        assert response.status_code == 400
        query_router.handle.assert_awaited_once_with(None)

    def test_upstream_error_keeps_provider_status(self, client, query_router):
        query_router.handle = AsyncMock(
            side_effect=UpstreamSearchError(
                "Search provider fetch error: Unauthorized",
                status_code=401,
                details='{"message": "bad token"}',
            )
        )

        response = client.get("/api/search", params={"query": "tide pools"})

        assert response.status_code == 401
        assert response.json()["details"] == '{"message": "bad token"}'

    def test_search_not_configured(self, client, query_router):
        query_router.handle = AsyncMock(side_effect=SearchNotConfiguredError())

        response = client.get("/api/search", params={"query": "tide pools"})

        assert response.status_code == 500
        assert response.json() == {"error": "Search API key not configured."}

    def test_unhandled_exception_is_generic_500(self, client, query_router):
        query_router.handle = AsyncMock(side_effect=RuntimeError("secret internals"))

        response = client.get("/api/search", params={"query": "tide pools"})

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Internal server error processing request."
        assert "secret" not in response.text

    def test_post_not_allowed(self, client):
        response = client.post("/api/search", params={"query": "tide pools"})
        assert response.status_code == 405

    def test_cors_preflight(self, client):
        response = client.options(
            "/api/search",
            headers={
                "Origin": "https://app.example.com",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.status_code == 200
        assert "access-control-allow-origin" in response.headers


class TestHealthEndpoint:
    def test_health_check(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] in ["healthy", "degraded"]
        assert "search_configured" in data
