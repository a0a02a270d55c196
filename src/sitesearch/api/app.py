"""FastAPI application factory and lifecycle management."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sitesearch import __version__
from sitesearch.adapters.loader import load_corpus
from sitesearch.api.deps import set_engine, set_settings
from sitesearch.api.v1.router import router as v1_router
from sitesearch.config.settings import Settings
from sitesearch.core.engine import SearchEngine

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings. If None, loads from environment.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        # Auto-detect sitesearch-config.yaml if present
        yaml_path = Path("sitesearch-config.yaml")
        if yaml_path.exists():
            logger.info("Loading configuration from %s", yaml_path)
            settings = Settings.from_yaml(yaml_path)
        else:
            settings = Settings()

    set_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Manage application lifecycle (startup/shutdown)."""
        logger.info("Starting SiteSearch v%s", __version__)

        engine = build_engine(settings)
        set_engine(engine)

        app.state.settings = settings
        app.state.engine = engine

        logger.info("SiteSearch is ready: %d documents indexed", len(engine))
        yield

        logger.info("Shutting down SiteSearch...")
        set_engine(None)

    app = FastAPI(
        title="SiteSearch",
        description="Term-weighted search over a personal site's blog posts, projects and notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/v1")

    return app


def build_engine(settings: Settings) -> SearchEngine:
    """Create a search engine seeded from the configured corpus file.

    A missing ``search.corpus_path`` yields an empty engine.

    Args:
        settings: Application settings.

    Returns:
        The seeded engine.
    """
    engine = SearchEngine(snippet_context_length=settings.search.snippet_context_length)
    corpus_path = settings.search.corpus_path
    if corpus_path is None:
        logger.warning("No corpus configured (search.corpus_path); starting with an empty index")
        return engine

    engine.add_items(load_corpus(corpus_path))
    return engine
