"""Data models shared across the engine, adapters and API."""

from sitesearch.models.document import Document, DocumentType
from sitesearch.models.records import (
    BlogPost,
    BlogPostData,
    ContentRecord,
    Project,
    ProjectData,
    ProjectStatus,
    RecordData,
)
from sitesearch.models.response import SearchResponse
from sitesearch.models.result import SearchResult

__all__ = [
    "BlogPost",
    "BlogPostData",
    "ContentRecord",
    "Document",
    "DocumentType",
    "Project",
    "ProjectData",
    "ProjectStatus",
    "RecordData",
    "SearchResponse",
    "SearchResult",
]
