"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from sitesearch.config.settings import Settings
from sitesearch.core.engine import SearchEngine

# Global instances (set during application lifespan)
_engine: SearchEngine | None = None
_settings: Settings | None = None


def set_engine(engine: SearchEngine | None) -> None:
    """Set the global engine instance (called during app lifespan)."""
    global _engine
    _engine = engine


def set_settings(settings: Settings | None) -> None:
    """Set the global settings instance (called by the app factory)."""
    global _settings
    _settings = settings


def get_engine() -> SearchEngine:
    """Get the global search engine instance.

    Returns:
        The initialized SearchEngine.

    Raises:
        RuntimeError: If the engine is not initialized.
    """
    if _engine is None:
        raise RuntimeError("Search engine not initialized. Is the server running?")
    return _engine


def get_settings() -> Settings:
    """Get the settings the application was created with."""
    if _settings is None:
        raise RuntimeError("Settings not initialized. Was the app created with create_app()?")
    return _settings
