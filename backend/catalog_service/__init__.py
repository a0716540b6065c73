"""In-memory library and content catalogs served over GraphQL."""

__version__ = "1.0.0"
