"""Corpus loader — Reads exported content collections from a JSON or YAML file.

The file holds a top-level mapping of collection name to a list of records::

    blog:
      - slug: hello-world
        body: "..."
        data: {title: Hello World, description: ..., publishDate: 2024-01-15}
    projects:
      - ...
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from sitesearch.adapters.base.registry import AdapterRegistry, default_registry
from sitesearch.models.document import Document

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


def read_collections(path: str | Path) -> dict[str, list[Any]]:
    """Read the raw collection mapping from a corpus file.

    Args:
        path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Collection name to raw records.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the suffix is unsupported, the top level is not a mapping
            or a collection is not a list of records.
    """
    corpus_path = Path(path)
    if not corpus_path.exists():
        raise FileNotFoundError(f"Corpus file not found: {corpus_path}")

    suffix = corpus_path.suffix.lower()
    with open(corpus_path, encoding="utf-8") as f:
        if suffix in _JSON_SUFFIXES:
            data = json.load(f)
        elif suffix in _YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported corpus format '{suffix}' (expected .json, .yaml or .yml)")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Corpus file {corpus_path} must contain a mapping of collections")
    collections: dict[str, list[Any]] = {}
    for name, records in data.items():
        if records is None:
            records = []
        if not isinstance(records, list):
            raise ValueError(f"Collection '{name}' in {corpus_path} must be a list of records")
        collections[str(name)] = records
    return collections


def load_corpus(path: str | Path, registry: AdapterRegistry | None = None) -> list[Document]:
    """Load a corpus file and map every known collection to documents.

    Args:
        path: Path to the corpus file.
        registry: Adapter registry; defaults to the built-in adapters.

    Returns:
        Documents from all collections with a registered adapter.
    """
    registry = registry or default_registry()
    collections = read_collections(path)
    documents = registry.build_all(collections)
    logger.info("Loaded %d documents from %s", len(documents), path)
    return documents
