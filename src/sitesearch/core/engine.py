"""SiteSearch Engine — In-memory storage and ranking of site documents.

The engine owns an append-only, ordered list of documents and answers
free-text queries against it:

  query → [tokenize] → terms
        → [DocumentScorer] → score per document (0 = no match)
        → [highlighter] → title / description highlights
        → sort by score (stable), truncate to ``limit``

All operations are synchronous and perform no I/O. The engine is not
thread-safe; callers sharing an instance across threads must serialise
access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sitesearch.core.highlighter import DEFAULT_CONTEXT_LENGTH, build_highlights
from sitesearch.core.scorer import DocumentScorer
from sitesearch.models.document import Document
from sitesearch.models.result import SearchResult

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class SearchEngine:
    """Term-weighted search over an in-memory document collection.

    Example:
        >>> engine = SearchEngine(build_documents(posts, projects))
        >>> engine.add_items([note])
        >>> results = engine.search("python asyncio", limit=5)

    Attributes:
        snippet_context_length: Context size used for description snippets.
    """

    def __init__(
        self,
        documents: Iterable[Document] | None = None,
        snippet_context_length: int = DEFAULT_CONTEXT_LENGTH,
    ) -> None:
        self._documents: list[Document] = list(documents) if documents is not None else []
        self.snippet_context_length = snippet_context_length

    def __len__(self) -> int:
        return len(self._documents)

    @property
    def documents(self) -> tuple[Document, ...]:
        """Snapshot of the held documents, in insertion order."""
        return tuple(self._documents)

    def add_items(self, documents: Iterable[Document]) -> None:
        """Append documents to the collection, preserving their order.

        No deduplication is performed: a document added twice is scored twice.

        Args:
            documents: Documents to append (may be empty).
        """
        before = len(self._documents)
        self._documents.extend(documents)
        logger.debug("Added %d documents (total %d)", len(self._documents) - before, len(self._documents))

    def search(self, query: str, limit: int = DEFAULT_LIMIT) -> list[SearchResult]:
        """Rank the held documents against a free-text query.

        Documents scoring ``0`` are dropped before ranking. Equal scores keep
        insertion order.

        Args:
            query: Free-text query; blank queries match nothing.
            limit: Maximum number of results. Non-positive values yield no results.

        Returns:
            Up to ``limit`` results, highest score first.
        """
        if not query.strip() or limit <= 0:
            return []

        terms = DocumentScorer.tokenize(query)
        results: list[SearchResult] = []

        for document in self._documents:
            score = DocumentScorer.score(document, terms)
            if score > 0:
                results.append(
                    SearchResult(
                        document=document,
                        score=score,
                        highlights=build_highlights(document, terms, self.snippet_context_length),
                    )
                )

        results.sort(key=lambda r: r.score, reverse=True)

        logger.debug(
            "Query %r matched %d of %d documents (limit %d)",
            query,
            len(results),
            len(self._documents),
            limit,
        )
        return results[:limit]
