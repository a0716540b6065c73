"""In-memory stores backing the GraphQL schemas."""
from catalog_service.storage.content import ContentStore
from catalog_service.storage.library import LibraryStore

__all__ = ["LibraryStore", "ContentStore"]
