"""Document Scorer — Fixed-weight relevance scoring of documents against query terms.

Scoring rules (per search term, case-insensitive, all additive):
  - term is a substring of the title            → +10
  - term is a substring of any tag              → +8
  - term is a substring of the description      → +5
  - term is a substring of the content          → +2
  - term equals a whole word of the searchable
    text (title, description, content and tags) → +3

A document's score is the sum of its per-term subtotals. There is no
normalisation by length or term frequency.
"""

from __future__ import annotations

from sitesearch.models.document import Document

TITLE_WEIGHT = 10
TAG_WEIGHT = 8
DESCRIPTION_WEIGHT = 5
CONTENT_WEIGHT = 2
WHOLE_WORD_WEIGHT = 3


class DocumentScorer:
    """Scores documents with a linear combination of boolean field hits."""

    @staticmethod
    def tokenize(query: str) -> list[str]:
        """Split a query into lower-cased search terms.

        Repeated terms are kept, so each occurrence is scored separately.

        Args:
            query: Free-text query.

        Returns:
            Non-empty, lower-cased terms in query order.
        """
        return [term for term in query.lower().split() if term]

    @staticmethod
    def score(document: Document, terms: list[str]) -> int:
        """Compute the aggregate score of a document for the given terms.

        Args:
            document: The document to score.
            terms: Lower-cased search terms (see ``tokenize``).

        Returns:
            The aggregate score; ``0`` means no match.
        """
        title = document.title.lower()
        tags = [tag.lower() for tag in document.tags]
        description = document.description.lower() if document.description else None
        content = document.content.lower() if document.content else None
        words = set(document.searchable_text().split())

        total = 0
        for term in terms:
            total += DocumentScorer._score_term(term, title, tags, description, content, words)
        return total

    @staticmethod
    def _score_term(
        term: str,
        title: str,
        tags: list[str],
        description: str | None,
        content: str | None,
        words: set[str],
    ) -> int:
        """Score a single term against pre-lowered document fields."""
        points = 0
        if term in title:
            points += TITLE_WEIGHT
        if any(term in tag for tag in tags):
            points += TAG_WEIGHT
        if description is not None and term in description:
            points += DESCRIPTION_WEIGHT
        if content is not None and term in content:
            points += CONTENT_WEIGHT
        if term in words:
            points += WHOLE_WORD_WEIGHT
        return points
