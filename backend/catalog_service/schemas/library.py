"""Input schemas for the library lending catalog."""
from typing import Optional

from pydantic import Field, field_validator

from catalog_service.schemas.common import BaseSchema, not_blank


class BookCreate(BaseSchema):
    title: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    year: Optional[int] = None
    available: bool = True
    category: Optional[str] = None

    @field_validator("title", "author")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return not_blank(v)


class BookUpdate(BaseSchema):
    """
    Partial update for a book. Only fields that were explicitly set are
    applied; ``None`` clears ``year`` and ``category`` and is ignored for
    the required fields.
    """
    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    available: Optional[bool] = None
    category: Optional[str] = None

    @field_validator("title", "author")
    @classmethod
    def strip_text(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)


class UserCreate(BaseSchema):
    name: str = Field(..., min_length=1)
    email: str
    age: Optional[int] = Field(None, ge=0)

    @field_validator("name", "email")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        return not_blank(v)


class UserUpdate(BaseSchema):
    """
    Partial update for a library member. Zero and other falsy values are
    applied like any other value.
    """
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)

    @field_validator("name", "email")
    @classmethod
    def text_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)
