"""Search endpoint — Ranked, highlighted matches over the loaded site corpus."""

from __future__ import annotations

import time

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query

from sitesearch.api.deps import get_engine, get_settings
from sitesearch.config.settings import Settings
from sitesearch.core.engine import SearchEngine
from sitesearch.models.response import SearchResponse

logger = structlog.get_logger(__name__)

router = APIRouter()


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Site Search",
    description=(
        "Rank site documents against a free-text query.\n\n"
        "Each query term scores independently: title (+10), tag (+8), "
        "description (+5) and content (+2) substring hits plus a whole-word "
        "bonus (+3). Results are sorted by score, best first, and carry up "
        "to two highlights (matching title, description snippet).\n\n"
        "A blank query returns an empty result list."
    ),
    responses={
        422: {"description": "Validation error: limit out of range or query too long"},
    },
)
def search(
    q: str = Query(default="", max_length=2000, description="Free-text query"),
    limit: int | None = Query(default=None, ge=1, description="Maximum number of results"),
    engine: SearchEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
) -> SearchResponse:
    """Run a query against the in-memory corpus.

    Args:
        q: The free-text query.
        limit: Result cap; defaults to ``search.default_limit``.
        engine: The search engine instance (injected).
        settings: Application settings (injected).

    Returns:
        A SearchResponse with the ranked results.
    """
    effective_limit = limit if limit is not None else settings.search.default_limit
    if effective_limit > settings.search.max_limit:
        raise HTTPException(
            status_code=422,
            detail=f"limit must be at most {settings.search.max_limit}",
        )

    start_time = time.monotonic()
    results = engine.search(q, limit=effective_limit)
    processing_time_ms = int((time.monotonic() - start_time) * 1000)

    logger.info(
        "search_served",
        query=q,
        limit=effective_limit,
        total=len(results),
        processing_time_ms=processing_time_ms,
    )

    return SearchResponse(
        query=q,
        limit=effective_limit,
        total=len(results),
        results=results,
        processing_time_ms=processing_time_ms,
    )
