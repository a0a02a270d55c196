"""Content record models — Typed shapes of the site's content collections.

Records arrive from the static-site content layer as loosely-typed dicts::

    {
        "slug": "hello-world",
        "body": "Markdown body ...",
        "data": {"title": "...", "description": "...", "publishDate": "2024-01-15", "tags": ["demo"]},
    }

These models validate that shape at the adapter boundary and fill in the
collection defaults (``tags=[]``, ``draft=False``, ...).
"""

from __future__ import annotations

from datetime import date, datetime, time
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _coerce_datetime(v: Any) -> Any:
    """Promote a bare date (e.g. unquoted YAML) to midnight of that day."""
    if isinstance(v, date) and not isinstance(v, datetime):
        return datetime.combine(v, time.min)
    return v


class ProjectStatus(str, Enum):
    """Lifecycle state of a project entry."""

    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    PLANNED = "planned"


class RecordData(BaseModel):
    """Frontmatter fields shared by every collection."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(description="Entry title")
    description: str = Field(description="Entry summary")
    publish_date: datetime = Field(alias="publishDate", description="Publication date")
    tags: list[str] = Field(default_factory=list, description="Entry tags")
    featured: bool = Field(default=False, description="Pinned on the landing page")
    image: str | None = Field(default=None, description="Cover image path")

    @field_validator("tags", mode="before")
    @classmethod
    def _default_tags(cls, v: Any) -> Any:
        """Treat an explicit null like a missing tag list."""
        return [] if v is None else v

    @field_validator("publish_date", mode="before")
    @classmethod
    def _coerce_publish_date(cls, v: Any) -> Any:
        return _coerce_datetime(v)


class BlogPostData(RecordData):
    """Frontmatter of a blog post."""

    updated_date: datetime | None = Field(default=None, alias="updatedDate", description="Last revision date")
    draft: bool = Field(default=False, description="Unpublished draft")

    @field_validator("updated_date", mode="before")
    @classmethod
    def _coerce_updated_date(cls, v: Any) -> Any:
        return _coerce_datetime(v)


class ProjectData(RecordData):
    """Frontmatter of a project entry."""

    github: str | None = Field(default=None, description="Source repository URL")
    demo: str | None = Field(default=None, description="Live demo URL")
    status: ProjectStatus = Field(default=ProjectStatus.COMPLETED, description="Project status")


class ContentRecord(BaseModel):
    """A collection entry: slug, raw body and validated frontmatter."""

    slug: str = Field(description="URL slug of the entry")
    body: str | None = Field(default=None, description="Raw Markdown body")
    data: RecordData


class BlogPost(ContentRecord):
    """A blog collection entry."""

    data: BlogPostData


class Project(ContentRecord):
    """A projects collection entry."""

    data: ProjectData
