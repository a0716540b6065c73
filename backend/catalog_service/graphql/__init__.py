"""
GraphQL schemas.

Two independent schemas are exposed, each backed by its own store taken
from the request context:

- ``library``: books and members with borrow/return mutations;
- ``content``: users, posts and products.
"""
from catalog_service.graphql.content import build_content_schema
from catalog_service.graphql.library import build_library_schema

__all__ = ["build_library_schema", "build_content_schema"]
