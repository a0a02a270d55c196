"""Projects adapter — Maps project entries to documents under ``/projects``."""

from __future__ import annotations

from sitesearch.adapters.base.adapter import ContentAdapter
from sitesearch.models.document import DocumentType
from sitesearch.models.records import Project


class ProjectAdapter(ContentAdapter[Project]):
    """Adapter for the ``projects`` content collection."""

    @property
    def name(self) -> str:
        return "projects"

    @property
    def document_type(self) -> DocumentType:
        return DocumentType.PROJECT

    @property
    def url_prefix(self) -> str:
        return "/projects"

    @property
    def record_model(self) -> type[Project]:
        return Project
