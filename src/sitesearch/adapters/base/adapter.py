"""Base content adapter — Abstract interface for content collection mappers.

Every content collection (blog, projects, ...) is fed to the search engine
through an adapter. The adapter is responsible for:
  1. Validating raw records against the collection schema
  2. Mapping each record to the standard ``Document`` shape
  3. Synthesising the document URL from the collection prefix and slug
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Generic, TypeVar

from pydantic import ValidationError

from sitesearch.adapters.base.exceptions import RecordValidationError
from sitesearch.models.document import Document, DocumentType
from sitesearch.models.records import ContentRecord

RecordT = TypeVar("RecordT", bound=ContentRecord)


class ContentAdapter(ABC, Generic[RecordT]):
    """Abstract base class for content collection adapters.

    Subclasses declare the collection name, the document type they produce,
    the URL prefix and the pydantic record model. The mapping itself is
    shared; subclasses only override ``to_document`` when a collection needs
    extra fields.

    Adapters are stateless and perform no I/O.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Collection name (e.g., 'blog', 'projects')."""

    @property
    @abstractmethod
    def document_type(self) -> DocumentType:
        """Type assigned to every document built by this adapter."""

    @property
    @abstractmethod
    def url_prefix(self) -> str:
        """Path prefix joined with the record slug (e.g., '/blog')."""

    @property
    @abstractmethod
    def record_model(self) -> type[RecordT]:
        """Pydantic model describing one record of the collection."""

    def parse_record(self, record: RecordT | Mapping[str, Any]) -> RecordT:
        """Validate a raw record against the collection schema.

        Args:
            record: A record model instance or a raw mapping.

        Returns:
            The validated record.

        Raises:
            RecordValidationError: If the mapping does not match the schema.
        """
        if isinstance(record, self.record_model):
            return record
        try:
            return self.record_model.model_validate(record)
        except ValidationError as e:
            slug = record.get("slug", "<unknown>") if isinstance(record, Mapping) else "<unknown>"
            raise RecordValidationError(f"Invalid {self.name} record '{slug}': {e}") from e

    def to_document(self, record: RecordT | Mapping[str, Any]) -> Document:
        """Map one record to a ``Document``.

        Args:
            record: A record model instance or a raw mapping.

        Returns:
            The normalized document.
        """
        parsed = self.parse_record(record)
        data = parsed.data
        return Document(
            title=data.title,
            description=data.description,
            content=parsed.body or "",
            url=f"{self.url_prefix}/{parsed.slug}",
            type=self.document_type,
            tags=tuple(data.tags),
            publish_date=data.publish_date,
        )

    def build(self, records: Iterable[RecordT | Mapping[str, Any]]) -> list[Document]:
        """Map a sequence of records to documents, preserving order.

        Args:
            records: Records of this collection.

        Returns:
            One document per record.
        """
        return [self.to_document(record) for record in records]
