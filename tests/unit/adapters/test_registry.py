"""Tests for the content Adapter Registry."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from sitesearch.adapters.base.exceptions import AdapterNotFoundError
from sitesearch.adapters.base.registry import AdapterRegistry, default_registry
from sitesearch.adapters.blog.adapter import BlogAdapter
from sitesearch.adapters.projects.adapter import ProjectAdapter


class TestAdapterRegistry:
    """Tests for adapter registration and lookup."""

    def test_default_registry_has_builtin_adapters(self) -> None:
        registry = default_registry()

        assert registry.registered_adapters == ["blog", "projects"]
        assert isinstance(registry.get("blog"), BlogAdapter)
        assert isinstance(registry.get("projects"), ProjectAdapter)

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(AdapterNotFoundError, match="notes"):
            AdapterRegistry().get("notes")

    def test_register_under_custom_name(self) -> None:
        registry = AdapterRegistry()
        registry.register(BlogAdapter(), name="articles")

        assert registry.registered_adapters == ["articles"]

    def test_overwrite_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = AdapterRegistry()
        registry.register(BlogAdapter())

        with caplog.at_level(logging.WARNING):
            registry.register(BlogAdapter())

        assert "Overwriting existing adapter registration: blog" in caplog.text


class TestBuildAll:
    """Tests for building every known collection."""

    def test_builds_known_collections_in_order(
        self,
        blog_record: dict[str, Any],
        project_record: dict[str, Any],
    ) -> None:
        docs = default_registry().build_all({"projects": [project_record], "blog": [blog_record]})

        assert [d.url for d in docs] == ["/projects/sitesearch", "/blog/hello-world"]

    def test_unknown_collection_is_skipped(self, blog_record: dict[str, Any]) -> None:
        docs = default_registry().build_all({"blog": [blog_record], "notes": [{"slug": "n"}]})

        assert [d.url for d in docs] == ["/blog/hello-world"]

    def test_unknown_collection_raises_when_strict(self) -> None:
        with pytest.raises(AdapterNotFoundError):
            default_registry().build_all({"notes": []}, strict=True)
