"""Search response models — HTTP payloads returned by the API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sitesearch.models.result import SearchResult


class SearchResponse(BaseModel):
    """Ranked results for a single query."""

    query: str = Field(description="Query as received")
    limit: int = Field(description="Maximum number of results requested")
    total: int = Field(description="Number of results returned")
    results: list[SearchResult] = Field(default_factory=list, description="Results, best match first")
    processing_time_ms: int = Field(default=0, description="Time spent ranking in ms")
