"""Search result model — A scored match with display highlights."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sitesearch.models.document import Document


class SearchResult(BaseModel):
    """A document that matched a query.

    ``highlights`` holds at most two strings, in this order: the full title
    (when the title matched) and a snippet of the description around the
    first matching term.
    """

    document: Document = Field(description="The matched document")
    score: int = Field(gt=0, description="Aggregate relevance score")
    highlights: list[str] = Field(
        default_factory=list,
        max_length=2,
        description="Title and/or description snippet justifying the match",
    )
