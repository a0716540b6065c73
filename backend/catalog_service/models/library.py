"""Records held by the library lending catalog."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Book:
    """A book in the library.

    Attributes:
        id: string identifier handed out by the store.
        title: display title, never empty.
        author: display author, never empty.
        year: publication year, if known.
        available: False while a user holds the book, or when the book was
            taken out of circulation explicitly.
        category: free-form category, matched case-insensitively.
    """

    id: str
    title: str
    author: str
    year: Optional[int] = None
    available: bool = True
    category: Optional[str] = None


@dataclass
class User:
    """A library member.

    ``borrowed_books`` holds book ids in the order they were borrowed,
    without duplicates. The ids are weak references: a book deleted
    elsewhere simply stops resolving.
    """

    id: str
    name: str
    email: str
    age: Optional[int] = None
    borrowed_books: list[str] = field(default_factory=list)

    def holds(self, book_id: str) -> bool:
        return book_id in self.borrowed_books

    def hold(self, book_id: str) -> None:
        if book_id not in self.borrowed_books:
            self.borrowed_books.append(book_id)

    def release(self, book_id: str) -> bool:
        """Drop ``book_id`` from the held list; return whether it was held."""
        if book_id not in self.borrowed_books:
            return False
        self.borrowed_books = [b for b in self.borrowed_books if b != book_id]
        return True
