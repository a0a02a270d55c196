"""Tests for the GET /v1/search endpoint."""

from __future__ import annotations

import inspect
import json
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from sitesearch.api.app import create_app
from sitesearch.api.deps import get_engine, set_engine
from sitesearch.config.settings import Settings
from sitesearch.core.engine import SearchEngine


@pytest.fixture
def client(settings: Settings, engine: SearchEngine) -> TestClient:
    """Create a test client for the API."""
    app = create_app(settings)
    set_engine(engine)
    yield TestClient(app)
    set_engine(None)


class TestSearchEndpoint:
    """Tests for GET /v1/search."""

    def test_search_returns_ranked_results(self, client: TestClient) -> None:
        resp = client.get("/v1/search", params={"q": "hello"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["query"] == "hello"
        assert data["limit"] == 10
        assert data["total"] == 2
        assert [r["score"] for r in data["results"]] == [18, 13]
        assert data["results"][0]["document"]["url"] == "/blog/python-tips"
        assert data["results"][1]["highlights"] == ["Hello World"]

    def test_limit_parameter(self, client: TestClient) -> None:
        resp = client.get("/v1/search", params={"q": "hello", "limit": 1})

        assert resp.status_code == 200
        data = resp.json()
        assert data["total"] == 1
        assert data["results"][0]["score"] == 18

    def test_missing_query_returns_empty(self, client: TestClient) -> None:
        resp = client.get("/v1/search")

        assert resp.status_code == 200
        assert resp.json()["results"] == []

    def test_blank_query_returns_empty(self, client: TestClient) -> None:
        resp = client.get("/v1/search", params={"q": "   "})

        assert resp.status_code == 200
        assert resp.json()["total"] == 0

    def test_zero_limit_returns_422(self, client: TestClient) -> None:
        resp = client.get("/v1/search", params={"q": "hello", "limit": 0})
        assert resp.status_code == 422

    def test_limit_above_max_returns_422(self, client: TestClient, settings: Settings) -> None:
        resp = client.get("/v1/search", params={"q": "hello", "limit": settings.search.max_limit + 1})
        assert resp.status_code == 422

    def test_overlong_query_returns_422(self, client: TestClient) -> None:
        resp = client.get("/v1/search", params={"q": "x" * 2001})
        assert resp.status_code == 422

    def test_default_limit_from_settings(self, engine: SearchEngine) -> None:
        settings = Settings(_env_file=None, search={"default_limit": 1})  # type: ignore[call-arg]
        app = create_app(settings)
        set_engine(engine)
        try:
            data = TestClient(app).get("/v1/search", params={"q": "hello"}).json()
        finally:
            set_engine(None)

        assert data["limit"] == 1
        assert data["total"] == 1

    def test_handler_runs_in_threadpool(self) -> None:
        """The handler is a plain function so searches stay off the event loop."""
        from sitesearch.api.v1.endpoints.search import search

        assert not inspect.iscoroutinefunction(search)


class TestLifespan:
    """Tests for corpus loading at startup."""

    def test_corpus_is_loaded_on_startup(
        self,
        tmp_path: Path,
        blog_record: dict[str, Any],
        project_record: dict[str, Any],
    ) -> None:
        corpus = tmp_path / "corpus.json"
        corpus.write_text(json.dumps({"blog": [blog_record], "projects": [project_record]}))
        settings = Settings(_env_file=None, search={"corpus_path": str(corpus)})  # type: ignore[call-arg]

        with TestClient(create_app(settings)) as client:
            resp = client.get("/v1/search", params={"q": "greeting"})
            assert resp.json()["results"][0]["document"]["url"] == "/blog/hello-world"

        with pytest.raises(RuntimeError):
            get_engine()

    def test_no_corpus_starts_empty(self, settings: Settings) -> None:
        with TestClient(create_app(settings)) as client:
            assert client.get("/v1/health").json()["document_count"] == 0
