"""Input schemas for the generic entity catalog."""
from typing import Optional

from pydantic import Field, field_validator

from catalog_service.schemas.common import BaseSchema, not_blank


class UserCreate(BaseSchema):
    name: str = Field(..., min_length=1)
    email: str
    age: Optional[int] = Field(None, ge=0)

    @field_validator("name", "email")
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        return not_blank(v)


class UserUpdate(BaseSchema):
    name: Optional[str] = None
    email: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)

    @field_validator("name", "email")
    @classmethod
    def text_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)


class PostCreate(BaseSchema):
    title: str = Field(..., min_length=1)
    content: str
    author_id: str
    published: bool = False


class PostUpdate(BaseSchema):
    title: Optional[str] = None
    content: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)


class ProductCreate(BaseSchema):
    name: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    category: Optional[str] = None


class ProductUpdate(BaseSchema):
    name: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    stock: Optional[int] = Field(None, ge=0)
    category: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: Optional[str]) -> Optional[str]:
        return not_blank(v)
