"""Sample records loaded into fresh stores."""
from catalog_service.models import content, library


def library_books() -> list[library.Book]:
    return [
        library.Book(
            id="1",
            title="The Great Gatsby",
            author="F. Scott Fitzgerald",
            year=1925,
            available=True,
            category="Classic",
        ),
        library.Book(
            id="2",
            title="To Kill a Mockingbird",
            author="Harper Lee",
            year=1960,
            available=False,
            category="Fiction",
        ),
        library.Book(
            id="3",
            title="1984",
            author="George Orwell",
            year=1949,
            available=True,
            category="Dystopian",
        ),
    ]


def library_users() -> list[library.User]:
    return [
        # John holds book 2, which is why it starts out unavailable
        library.User(id="1", name="John Doe", email="john@example.com", age=30, borrowed_books=["2"]),
        library.User(id="2", name="Jane Smith", email="jane@example.com", age=25),
    ]


def content_users() -> list[content.User]:
    return [
        content.User(id="1", name="John Doe", email="john@example.com", age=30),
        content.User(id="2", name="Jane Smith", email="jane@example.com", age=25),
    ]


def content_posts() -> list[content.Post]:
    return [
        content.Post(
            id="1",
            title="First Post",
            content="This is the first post",
            author_id="1",
            published=True,
        ),
        content.Post(
            id="2",
            title="Second Post",
            content="A draft that is not published yet",
            author_id="1",
            published=False,
        ),
        content.Post(
            id="3",
            title="Third Post",
            content="Jane's first post",
            author_id="2",
            published=True,
        ),
    ]


def content_products() -> list[content.Product]:
    return [
        content.Product(id="1", name="Laptop", price=999.99, stock=10, category="Electronics"),
        content.Product(id="2", name="Smartphone", price=699.99, stock=25, category="Electronics"),
        content.Product(id="3", name="Headphones", price=149.99, stock=50, category="Electronics"),
    ]
