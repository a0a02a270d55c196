"""Content adapter layer — Maps site content collections to searchable documents.

Built-in adapters:
  - blog: blog posts, served under ``/blog/<slug>``
  - projects: project entries, served under ``/projects/<slug>``

Implement ``ContentAdapter`` and register it on an ``AdapterRegistry`` to
index another collection.
"""

from sitesearch.adapters.content import build_documents
from sitesearch.adapters.loader import load_corpus

__all__ = ["build_documents", "load_corpus"]
