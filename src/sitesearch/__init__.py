"""SiteSearch — In-memory, term-weighted search for personal site content."""

__version__ = "0.1.0"
