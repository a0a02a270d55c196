"""Highlight extraction — Short display strings explaining why a document matched.

A result carries at most two highlights:
  1. The full title, when any search term occurs in it.
  2. A snippet of the description around the first search term (in query
     order) that occurs in it.

Content and tags never produce highlights.
"""

from __future__ import annotations

import math

from sitesearch.models.document import Document

ELLIPSIS = "..."
DEFAULT_CONTEXT_LENGTH = 100


def extract_snippet(text: str, term: str, context_length: int = DEFAULT_CONTEXT_LENGTH) -> str:
    """Cut a window of ``text`` around the first occurrence of ``term``.

    The window extends ``context_length / 2`` characters on each side of the
    match; both bounds are floored. The slice keeps the original casing and
    gets an ellipsis on each side where it was truncated.

    Args:
        text: Text to cut the snippet from.
        term: Term to locate (case-insensitive).
        context_length: Total number of context characters around the match.

    Returns:
        The snippet, or an empty string when ``term`` does not occur.
    """
    index = text.lower().find(term.lower())
    if index == -1:
        return ""

    half = context_length / 2
    start = max(0, math.floor(index - half))
    end = min(len(text), math.floor(index + len(term) + half))

    snippet = text[start:end]
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(text):
        snippet = snippet + ELLIPSIS
    return snippet


def build_highlights(
    document: Document,
    terms: list[str],
    context_length: int = DEFAULT_CONTEXT_LENGTH,
) -> list[str]:
    """Build the highlight list for a matched document.

    Args:
        document: The matched document.
        terms: Lower-cased search terms, in query order.
        context_length: Context size passed to ``extract_snippet``.

    Returns:
        Zero, one or two highlight strings: ``[title?, description_snippet?]``.
    """
    highlights: list[str] = []

    title = document.title.lower()
    if any(term in title for term in terms):
        highlights.append(document.title)

    if document.description:
        description = document.description.lower()
        for term in terms:
            if term in description:
                snippet = extract_snippet(document.description, term, context_length)
                if snippet:
                    highlights.append(snippet)
                break

    return highlights
