"""Search core — engine, scoring and highlighting."""

from sitesearch.core.engine import SearchEngine
from sitesearch.core.scorer import DocumentScorer

__all__ = ["DocumentScorer", "SearchEngine"]
