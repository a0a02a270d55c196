"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class RecordValidationError(AdapterError):
    """Raised when a content record does not match its collection schema."""


class AdapterNotFoundError(AdapterError):
    """Raised when no adapter is registered for a collection name."""
