"""Blog adapter — Maps blog collection entries to documents under ``/blog``."""

from __future__ import annotations

from sitesearch.adapters.base.adapter import ContentAdapter
from sitesearch.models.document import DocumentType
from sitesearch.models.records import BlogPost


class BlogAdapter(ContentAdapter[BlogPost]):
    """Adapter for the ``blog`` content collection.

    Drafts are indexed like any other post; filtering them is left to the
    caller that assembles the collection.
    """

    @property
    def name(self) -> str:
        return "blog"

    @property
    def document_type(self) -> DocumentType:
        return DocumentType.BLOG

    @property
    def url_prefix(self) -> str:
        return "/blog"

    @property
    def record_model(self) -> type[BlogPost]:
        return BlogPost
