"""Pydantic schemas for store inputs and HTTP responses."""
from catalog_service.schemas.common import DeleteResult, ErrorResponse, MessageResponse
from catalog_service.schemas.content import (
    PostCreate,
    PostUpdate,
    ProductCreate,
    ProductUpdate,
    UserCreate as ContentUserCreate,
    UserUpdate as ContentUserUpdate,
)
from catalog_service.schemas.library import BookCreate, BookUpdate, UserCreate, UserUpdate

__all__ = [
    "DeleteResult",
    "ErrorResponse",
    "MessageResponse",
    "BookCreate",
    "BookUpdate",
    "UserCreate",
    "UserUpdate",
    "ContentUserCreate",
    "ContentUserUpdate",
    "PostCreate",
    "PostUpdate",
    "ProductCreate",
    "ProductUpdate",
]
