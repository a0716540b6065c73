"""GraphQL schema for the generic entity catalog (users, posts, products)."""
from __future__ import annotations

from typing import Optional

import strawberry
from strawberry.types import Info

from catalog_service.graphql.base import CatalogSchema, build_schema, create_fields, input_fields, validated
from catalog_service.schemas.content import (
    PostCreate,
    PostUpdate,
    ProductCreate,
    ProductUpdate,
    UserCreate,
    UserUpdate,
)
from catalog_service.storage.content import ContentStore


def _store(info: Info) -> ContentStore:
    return info.context["content_store"]


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str
    email: str
    age: Optional[int]

    @strawberry.field
    def posts(self, info: Info) -> list[PostType]:
        return _store(info).posts_by_author(self.id)


@strawberry.type(name="Post")
class PostType:
    id: strawberry.ID
    title: str
    content: str
    author_id: strawberry.ID
    published: bool

    @strawberry.field(description="The author, or null once the author has been deleted")
    def author(self, info: Info) -> Optional[UserType]:
        return _store(info).post_author(self)


@strawberry.type(name="Product")
class ProductType:
    id: strawberry.ID
    name: str
    price: float
    stock: int
    category: Optional[str]


@strawberry.type
class DeleteResponse:
    success: bool
    message: str


@strawberry.input
class CreateUserInput:
    name: str
    email: str
    age: Optional[int] = strawberry.UNSET


@strawberry.input
class UpdateUserInput:
    name: Optional[str] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    age: Optional[int] = strawberry.UNSET


@strawberry.input
class CreatePostInput:
    title: str
    content: str
    author_id: strawberry.ID
    published: Optional[bool] = strawberry.UNSET


@strawberry.input
class UpdatePostInput:
    title: Optional[str] = strawberry.UNSET
    content: Optional[str] = strawberry.UNSET
    published: Optional[bool] = strawberry.UNSET


@strawberry.input
class CreateProductInput:
    name: str
    price: float
    stock: int
    category: Optional[str] = strawberry.UNSET


@strawberry.input
class UpdateProductInput:
    name: Optional[str] = strawberry.UNSET
    price: Optional[float] = strawberry.UNSET
    stock: Optional[int] = strawberry.UNSET
    category: Optional[str] = strawberry.UNSET


def _deleted(result) -> DeleteResponse:
    return DeleteResponse(success=result.success, message=result.message)


@strawberry.type
class Query:
    @strawberry.field
    def users(self, info: Info) -> list[UserType]:
        return _store(info).list_users()

    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        return _store(info).get_user(id)

    @strawberry.field
    def posts(self, info: Info, published: Optional[bool] = None) -> list[PostType]:
        return _store(info).list_posts(published=published)

    @strawberry.field
    def post(self, info: Info, id: strawberry.ID) -> Optional[PostType]:
        return _store(info).get_post(id)

    @strawberry.field
    def posts_by_author(self, info: Info, author_id: strawberry.ID) -> list[PostType]:
        return _store(info).posts_by_author(author_id)

    @strawberry.field
    def products(self, info: Info) -> list[ProductType]:
        return _store(info).list_products()

    @strawberry.field
    def product(self, info: Info, id: strawberry.ID) -> Optional[ProductType]:
        return _store(info).get_product(id)

    @strawberry.field
    def products_by_category(self, info: Info, category: str) -> list[ProductType]:
        return _store(info).products_by_category(category)

    @strawberry.field
    def search_products(self, info: Info, name: str) -> list[ProductType]:
        return _store(info).search_products(name)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_user(self, info: Info, input: CreateUserInput) -> UserType:
        return _store(info).create_user(validated(UserCreate, create_fields(input)))

    @strawberry.mutation
    def update_user(self, info: Info, id: strawberry.ID, input: UpdateUserInput) -> Optional[UserType]:
        return _store(info).update_user(id, validated(UserUpdate, input_fields(input)))

    @strawberry.mutation
    def delete_user(self, info: Info, id: strawberry.ID) -> DeleteResponse:
        return _deleted(_store(info).delete_user(id))

    @strawberry.mutation
    def create_post(self, info: Info, input: CreatePostInput) -> PostType:
        return _store(info).create_post(validated(PostCreate, create_fields(input)))

    @strawberry.mutation
    def update_post(self, info: Info, id: strawberry.ID, input: UpdatePostInput) -> Optional[PostType]:
        return _store(info).update_post(id, validated(PostUpdate, input_fields(input)))

    @strawberry.mutation
    def delete_post(self, info: Info, id: strawberry.ID) -> DeleteResponse:
        return _deleted(_store(info).delete_post(id))

    @strawberry.mutation
    def create_product(self, info: Info, input: CreateProductInput) -> ProductType:
        return _store(info).create_product(validated(ProductCreate, create_fields(input)))

    @strawberry.mutation
    def update_product(self, info: Info, id: strawberry.ID, input: UpdateProductInput) -> Optional[ProductType]:
        return _store(info).update_product(id, validated(ProductUpdate, input_fields(input)))

    @strawberry.mutation
    def delete_product(self, info: Info, id: strawberry.ID) -> DeleteResponse:
        return _deleted(_store(info).delete_product(id))


def build_content_schema(introspection: bool = True) -> CatalogSchema:
    return build_schema(Query, Mutation, introspection=introspection)
