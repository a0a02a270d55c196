"""Content mapping — Builds the search corpus from the site's collections."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from sitesearch.adapters.blog.adapter import BlogAdapter
from sitesearch.adapters.projects.adapter import ProjectAdapter
from sitesearch.models.document import Document
from sitesearch.models.records import BlogPost, Project

_blog_adapter = BlogAdapter()
_project_adapter = ProjectAdapter()


def build_documents(
    blog_records: Iterable[BlogPost | Mapping[str, Any]],
    project_records: Iterable[Project | Mapping[str, Any]],
) -> list[Document]:
    """Map blog posts and projects to searchable documents.

    Blog documents come first, then projects, each in input order.

    Args:
        blog_records: Entries of the ``blog`` collection.
        project_records: Entries of the ``projects`` collection.

    Returns:
        The combined document list.

    Raises:
        RecordValidationError: If a record does not match its collection schema.
    """
    return _blog_adapter.build(blog_records) + _project_adapter.build(project_records)
