"""Shared test fixtures and configuration."""

from __future__ import annotations

from typing import Any

import pytest

from sitesearch.config.settings import Settings
from sitesearch.core.engine import SearchEngine
from sitesearch.models.document import Document, DocumentType


@pytest.fixture
def settings() -> Settings:
    """Create a test Settings instance with defaults."""
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        debug=True,
    )


# ── Document fixtures ──


@pytest.fixture
def hello_document() -> Document:
    """A minimal blog post: title, one tag, short description, no body."""
    return Document(
        title="Hello World",
        description="A simple greeting",
        content="",
        url="/blog/hello",
        type=DocumentType.BLOG,
        tags=["demo"],
    )


@pytest.fixture
def python_document() -> Document:
    """A post that mentions 'hello' in tags, description and content but not the title."""
    return Document(
        title="Python Tips",
        description="Hello from the python world",
        content="Some hello content",
        url="/blog/python-tips",
        type=DocumentType.BLOG,
        tags=["python", "hello"],
    )


@pytest.fixture
def engine(hello_document: Document, python_document: Document) -> SearchEngine:
    """Engine seeded with the two sample documents, in that order."""
    return SearchEngine([hello_document, python_document])


# ── Raw content record fixtures (as exported by the site) ──


@pytest.fixture
def blog_record() -> dict[str, Any]:
    """A blog entry without tags."""
    return {
        "slug": "hello-world",
        "body": "First post body.",
        "data": {
            "title": "Hello World",
            "description": "A simple greeting",
            "publishDate": "2024-01-15",
        },
    }


@pytest.fixture
def project_record() -> dict[str, Any]:
    """A project entry with tags and a status."""
    return {
        "slug": "sitesearch",
        "body": "A tiny search engine for this site.",
        "data": {
            "title": "SiteSearch",
            "description": "Client-side search for the blog",
            "publishDate": "2024-03-02T09:30:00",
            "tags": ["python", "search"],
            "github": "https://github.com/example/sitesearch",
            "status": "in-progress",
        },
    }
