"""Records held by the generic entity catalog."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """A registered user who may author posts."""
    id: str
    name: str
    email: str
    age: Optional[int] = None


@dataclass
class Post:
    """A post; ``author_id`` is resolved lazily and may dangle."""
    id: str
    title: str
    content: str
    author_id: str
    published: bool = False


@dataclass
class Product:
    id: str
    name: str
    price: float
    stock: int
    category: Optional[str] = None
