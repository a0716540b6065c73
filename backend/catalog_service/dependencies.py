"""
FastAPI dependencies for the stores and settings.

Stores live on ``app.state``; they are created together with the app so
every app instance (and every test) gets its own data.
"""
from fastapi import Depends, Request

from catalog_service.config import Settings, get_settings
from catalog_service.storage import ContentStore, LibraryStore


def get_library_store(request: Request) -> LibraryStore:
    """
    Dependency to get the app's LibraryStore instance.
    """
    return request.app.state.library_store


def get_content_store(request: Request) -> ContentStore:
    """
    Dependency to get the app's ContentStore instance.
    """
    return request.app.state.content_store


def get_app_settings(request: Request) -> Settings:
    """
    Dependency to get the settings the app was built with.
    """
    return getattr(request.app.state, "settings", None) or get_settings()


async def get_library_context(store: LibraryStore = Depends(get_library_store)) -> dict:
    """GraphQL context for the library schema."""
    return {"library_store": store}


async def get_content_context(store: ContentStore = Depends(get_content_store)) -> dict:
    """GraphQL context for the content schema."""
    return {"content_store": store}
