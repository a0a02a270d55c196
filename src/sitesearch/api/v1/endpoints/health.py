"""Health check endpoint — Liveness and corpus size."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from sitesearch import __version__
from sitesearch.api.deps import get_engine
from sitesearch.core.engine import SearchEngine

router = APIRouter()


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = Field(description="Health status (e.g. 'healthy')")
    version: str = Field(description="SiteSearch version")
    service: str = Field(description="Service name ('sitesearch')")
    document_count: int = Field(description="Number of documents held by the engine")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="System Health Check",
    description="Returns overall health, server version and the number of indexed documents.",
)
async def health_check(
    engine: SearchEngine = Depends(get_engine),
) -> HealthResponse:
    """Basic health check endpoint with corpus info."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        service="sitesearch",
        document_count=len(engine),
    )
