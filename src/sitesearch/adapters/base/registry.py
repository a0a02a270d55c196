"""Adapter Registry — Maps content collection names to their adapters.

The registry is the single place that knows which adapter handles which
collection. Loaders and the application factory route raw collections
through it instead of hard-coding adapter classes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from sitesearch.adapters.base.adapter import ContentAdapter
from sitesearch.adapters.base.exceptions import AdapterNotFoundError
from sitesearch.models.document import Document

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """Registry of content adapters keyed by collection name.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register(BlogAdapter())
        >>> documents = registry.get("blog").build(posts)
    """

    def __init__(self) -> None:
        self._adapters: dict[str, ContentAdapter[Any]] = {}

    def register(self, adapter: ContentAdapter[Any], name: str | None = None) -> None:
        """Register an adapter instance.

        Args:
            adapter: The adapter to register.
            name: Collection name; defaults to ``adapter.name``.
        """
        key = name or adapter.name
        if key in self._adapters:
            logger.warning("Overwriting existing adapter registration: %s", key)
        self._adapters[key] = adapter
        logger.debug("Registered adapter: %s", key)

    def get(self, name: str) -> ContentAdapter[Any]:
        """Get the adapter registered for a collection.

        Args:
            name: The collection name.

        Returns:
            The adapter instance.

        Raises:
            AdapterNotFoundError: If no adapter is registered under this name.
        """
        if name not in self._adapters:
            raise AdapterNotFoundError(
                f"No adapter registered for collection '{name}'. "
                f"Available adapters: {list(self._adapters.keys())}"
            )
        return self._adapters[name]

    def build_all(self, collections: Mapping[str, Iterable[Any]], strict: bool = False) -> list[Document]:
        """Build documents for several collections at once.

        Collections are processed in mapping order and records keep their
        order within each collection.

        Args:
            collections: Collection name to raw records.
            strict: Raise on unknown collections instead of skipping them.

        Returns:
            Documents from every known collection.

        Raises:
            AdapterNotFoundError: If ``strict`` and a collection has no adapter.
        """
        documents: list[Document] = []
        for name, records in collections.items():
            if name not in self._adapters:
                if strict:
                    raise AdapterNotFoundError(f"No adapter registered for collection '{name}'.")
                logger.warning("Skipping collection '%s': no adapter registered", name)
                continue
            built = self._adapters[name].build(records)
            logger.info("Built %d documents from collection '%s'", len(built), name)
            documents.extend(built)
        return documents

    @property
    def registered_adapters(self) -> list[str]:
        """List all registered collection names."""
        return list(self._adapters.keys())


def default_registry() -> AdapterRegistry:
    """Create a registry with the built-in ``blog`` and ``projects`` adapters."""
    from sitesearch.adapters.blog.adapter import BlogAdapter
    from sitesearch.adapters.projects.adapter import ProjectAdapter

    registry = AdapterRegistry()
    registry.register(BlogAdapter())
    registry.register(ProjectAdapter())
    return registry
