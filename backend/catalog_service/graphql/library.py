"""GraphQL schema for the library lending catalog."""
from __future__ import annotations

from typing import Optional

import strawberry
from strawberry.types import Info

from catalog_service.graphql.base import CatalogSchema, build_schema, create_fields, input_fields, provided, validated
from catalog_service.schemas.library import BookCreate, BookUpdate, UserCreate, UserUpdate
from catalog_service.storage.library import LibraryStore


def _store(info: Info) -> LibraryStore:
    return info.context["library_store"]


@strawberry.type(name="Book", description="A Book represents a book in the library with all its details")
class BookType:
    id: strawberry.ID = strawberry.field(description="Unique identifier for the book")
    title: str = strawberry.field(description="Title of the book")
    author: str = strawberry.field(description="Author of the book")
    year: Optional[int] = strawberry.field(description="Publication year")
    available: bool = strawberry.field(description="Whether the book is available for borrowing")
    category: Optional[str] = strawberry.field(description="Category of the book")


@strawberry.type(name="User", description="A User represents a library member")
class UserType:
    id: strawberry.ID = strawberry.field(description="Unique identifier for the user")
    name: str = strawberry.field(description="Full name of the user")
    email: str = strawberry.field(description="Email address")
    age: Optional[int] = strawberry.field(description="Age in years")

    @strawberry.field(description="Books currently borrowed by the user")
    def borrowed_books(self, info: Info) -> Optional[list[BookType]]:
        return _store(info).borrowed_books(self)


@strawberry.input(description="Input for creating a new book")
class BookInput:
    title: str
    author: str
    year: Optional[int] = None
    available: Optional[bool] = True
    category: Optional[str] = None


@strawberry.input(description="Input for updating a book")
class BookUpdateInput:
    title: Optional[str] = strawberry.UNSET
    author: Optional[str] = strawberry.UNSET
    year: Optional[int] = strawberry.UNSET
    available: Optional[bool] = strawberry.UNSET
    category: Optional[str] = strawberry.UNSET


@strawberry.input(description="Input for creating a new user")
class UserInput:
    name: str
    email: str
    age: Optional[int] = None


@strawberry.type(description="Queries for fetching data")
class Query:
    @strawberry.field(description="Get all books in the library")
    def books(self, info: Info) -> list[BookType]:
        return _store(info).list_books()

    @strawberry.field(description="Get a specific book by ID")
    def book(self, info: Info, id: strawberry.ID) -> Optional[BookType]:
        return _store(info).get_book(id)

    @strawberry.field(description="Get all users")
    def users(self, info: Info) -> list[UserType]:
        return _store(info).list_users()

    @strawberry.field(description="Get a specific user by ID")
    def user(self, info: Info, id: strawberry.ID) -> Optional[UserType]:
        return _store(info).get_user(id)

    @strawberry.field(description="Search books by title or author")
    def search_books(self, info: Info, query: str) -> list[BookType]:
        return _store(info).search_books(query)

    @strawberry.field(description="Get only available books")
    def available_books(self, info: Info) -> list[BookType]:
        return _store(info).available_books()

    @strawberry.field(description="Get books by category")
    def books_by_category(self, info: Info, category: str) -> list[BookType]:
        return _store(info).books_by_category(category)


@strawberry.type(description="Mutations for modifying data")
class Mutation:
    @strawberry.mutation(description="Add a new book to the library")
    def add_book(self, info: Info, input: BookInput) -> BookType:
        return _store(info).add_book(validated(BookCreate, create_fields(input)))

    @strawberry.mutation(description="Update an existing book")
    def update_book(self, info: Info, id: strawberry.ID, input: BookUpdateInput) -> BookType:
        return _store(info).update_book(id, validated(BookUpdate, input_fields(input)))

    @strawberry.mutation(description="Delete a book from the library")
    def delete_book(self, info: Info, id: strawberry.ID) -> bool:
        return _store(info).delete_book(id).success

    @strawberry.mutation(description="Add a new user")
    def add_user(self, info: Info, input: UserInput) -> UserType:
        return _store(info).add_user(validated(UserCreate, create_fields(input)))

    @strawberry.mutation(description="Borrow a book")
    def borrow_book(self, info: Info, user_id: strawberry.ID, book_id: strawberry.ID) -> BookType:
        return _store(info).borrow_book(user_id, book_id)

    @strawberry.mutation(description="Return a borrowed book")
    def return_book(self, info: Info, user_id: strawberry.ID, book_id: strawberry.ID) -> BookType:
        return _store(info).return_book(user_id, book_id)

    @strawberry.mutation(description="Update user information")
    def update_user(
        self,
        info: Info,
        id: strawberry.ID,
        name: Optional[str] = strawberry.UNSET,
        email: Optional[str] = strawberry.UNSET,
        age: Optional[int] = strawberry.UNSET,
    ) -> UserType:
        patch = validated(UserUpdate, provided(name=name, email=email, age=age))
        return _store(info).update_user(id, patch)

    @strawberry.mutation(description="Delete a user")
    def delete_user(self, info: Info, id: strawberry.ID) -> bool:
        return _store(info).delete_user(id).success


def build_library_schema(introspection: bool = True) -> CatalogSchema:
    return build_schema(Query, Mutation, introspection=introspection)
