"""
Library lending catalog.

``LibraryStore`` owns the book and user collections and keeps the
borrow/return state consistent:

* a book has at most one holder, and a held book is never available;
* deleting a book removes its id from every user's borrowed list;
* returning a book releases it whoever asks, so any user may hand back
  any held book.
"""
from threading import RLock
from typing import List

from catalog_service.core.exceptions import ConflictError
from catalog_service.core.logging import get_logger
from catalog_service.core.utils import IdPolicy
from catalog_service.models.library import Book, User
from catalog_service.schemas.common import DeleteResult
from catalog_service.schemas.library import BookCreate, BookUpdate, UserCreate, UserUpdate
from catalog_service.storage import seed
from catalog_service.storage.base import InMemoryRepository

logger = get_logger("storage.library")

# Fields that cannot be cleared; an explicit null leaves them unchanged
REQUIRED_BOOK_FIELDS = frozenset({"title", "author", "available"})
REQUIRED_USER_FIELDS = frozenset({"name", "email"})


def _changes(patch, required: frozenset) -> dict:
    return {
        key: value
        for key, value in patch.model_dump(exclude_unset=True).items()
        if value is not None or key not in required
    }


class LibraryStore:
    """Books and library members held in process memory."""

    def __init__(self, id_policy: IdPolicy = "monotonic", seed_data: bool = True):
        self._lock = RLock()
        self._books: InMemoryRepository[Book] = InMemoryRepository("Book", id_policy)
        self._users: InMemoryRepository[User] = InMemoryRepository("User", id_policy)
        self._seed_data = seed_data
        if seed_data:
            self._load_seed()

    def _load_seed(self) -> None:
        for book in seed.library_books():
            self._books.load(book)
        for user in seed.library_users():
            self._users.load(user)

    def reset(self) -> None:
        """Drop every record and reload the sample data."""
        with self._lock:
            self._books.clear()
            self._users.clear()
            if self._seed_data:
                self._load_seed()
        logger.info("Library store reset")

    # Books

    def list_books(self) -> List[Book]:
        return self._books.list()

    def get_book(self, book_id: str) -> Book:
        return self._books.get(book_id)

    def search_books(self, query: str) -> List[Book]:
        """Case-insensitive substring match on title or author."""
        term = query.lower()
        return [
            b for b in self._books.list()
            if term in b.title.lower() or term in b.author.lower()
        ]

    def available_books(self) -> List[Book]:
        return [b for b in self._books.list() if b.available]

    def books_by_category(self, category: str) -> List[Book]:
        wanted = category.lower()
        return [
            b for b in self._books.list()
            if b.category is not None and b.category.lower() == wanted
        ]

    def add_book(self, data: BookCreate) -> Book:
        with self._lock:
            book = self._books.create(lambda id: Book(id=id, **data.model_dump()))
        logger.info("Added book %s (%r)", book.id, book.title)
        return book

    def update_book(self, book_id: str, patch: BookUpdate) -> Book:
        """Apply the explicitly provided fields of ``patch``."""
        with self._lock:
            book = self._books.get(book_id)
            changes = _changes(patch, REQUIRED_BOOK_FIELDS)
            for key, value in changes.items():
                setattr(book, key, value)
            if changes.get("available") is True:
                self._release_everywhere(book_id)
        logger.info("Updated book %s: %s", book_id, ", ".join(sorted(changes)) or "no changes")
        return book

    def delete_book(self, book_id: str) -> DeleteResult:
        with self._lock:
            removed = self._books.delete(book_id)
            # Cascade runs whether or not anybody held the book
            self._release_everywhere(book_id)
        if not removed:
            logger.debug("Delete of unknown book %s", book_id)
            return DeleteResult(success=False, message=f"Book with ID {book_id} not found")
        logger.info("Deleted book %s", book_id)
        return DeleteResult(success=True, message=f"Book with ID {book_id} deleted successfully")

    # Users

    def list_users(self) -> List[User]:
        return self._users.list()

    def get_user(self, user_id: str) -> User:
        return self._users.get(user_id)

    def borrowed_books(self, user: User) -> List[Book]:
        """Resolve a user's held ids, skipping books that no longer exist."""
        books = (self._books.find(book_id) for book_id in user.borrowed_books)
        return [b for b in books if b is not None]

    def add_user(self, data: UserCreate) -> User:
        with self._lock:
            user = self._users.create(lambda id: User(id=id, **data.model_dump()))
        logger.info("Added user %s (%s)", user.id, user.email)
        return user

    def update_user(self, user_id: str, patch: UserUpdate) -> User:
        """Apply the explicitly provided fields of ``patch``, falsy ones included."""
        with self._lock:
            user = self._users.get(user_id)
            changes = _changes(patch, REQUIRED_USER_FIELDS)
            for key, value in changes.items():
                setattr(user, key, value)
        logger.info("Updated user %s: %s", user_id, ", ".join(sorted(changes)) or "no changes")
        return user

    def delete_user(self, user_id: str) -> DeleteResult:
        with self._lock:
            user = self._users.find(user_id)
            if user is None:
                return DeleteResult(success=False, message=f"User with ID {user_id} not found")
            for book in self.borrowed_books(user):
                book.available = True
            self._users.delete(user_id)
        logger.info("Deleted user %s, released %d book(s)", user_id, len(user.borrowed_books))
        return DeleteResult(success=True, message=f"User with ID {user_id} deleted successfully")

    # Lending

    def borrow_book(self, user_id: str, book_id: str) -> Book:
        with self._lock:
            user = self._users.get(user_id)
            book = self._books.get(book_id)
            if not book.available:
                raise ConflictError(f'Book "{book.title}" is not available', book_id)
            book.available = False
            user.hold(book_id)
        logger.info("User %s borrowed book %s", user_id, book_id)
        return book

    def return_book(self, user_id: str, book_id: str) -> Book:
        with self._lock:
            user = self._users.get(user_id)
            book = self._books.get(book_id)
            if not user.holds(book_id):
                logger.warning("User %s returned book %s without holding it", user_id, book_id)
            book.available = True
            user.release(book_id)
            self._release_everywhere(book_id)
        logger.info("User %s returned book %s", user_id, book_id)
        return book

    def _release_everywhere(self, book_id: str) -> None:
        for user in self._users.list():
            user.release(book_id)
