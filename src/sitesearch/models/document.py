"""Document model — Uniform, searchable representation of site content.

Every content record (blog post, project entry, note) is mapped to a
``Document`` by the adapter layer before it reaches the search engine.
Documents are immutable once built.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class DocumentType(str, Enum):
    """Kind of content a document was built from."""

    BLOG = "blog"
    PROJECT = "project"
    NOTE = "note"


class Document(BaseModel):
    """A single searchable item.

    An empty ``title`` is accepted: it simply never earns title points.
    ``publish_date`` is carried through to results but is not used for
    ranking.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(description="Document title")
    description: str | None = Field(default=None, description="Short summary shown under the title")
    content: str | None = Field(default=None, description="Full body text")
    url: str = Field(description="Location of the document on the site")
    type: DocumentType = Field(description="Content kind: blog, project or note")
    tags: tuple[str, ...] = Field(default_factory=tuple, description="Free-form labels")
    publish_date: datetime | None = Field(
        default=None,
        alias="publishDate",
        description="Publication timestamp",
    )

    def searchable_text(self) -> str:
        """Return the lower-cased blob used for whole-word matching."""
        parts = [self.title, self.description or "", self.content or "", *self.tags]
        return " ".join(parts).lower()
