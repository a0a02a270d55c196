"""Base adapter interface — Abstract classes for content collection adapters."""

from sitesearch.adapters.base.adapter import ContentAdapter
from sitesearch.adapters.base.registry import AdapterRegistry, default_registry

__all__ = ["AdapterRegistry", "ContentAdapter", "default_registry"]
