"""In-memory record types."""
from catalog_service.models.content import Post, Product
from catalog_service.models.content import User as ContentUser
from catalog_service.models.library import Book, User

__all__ = ["Book", "User", "ContentUser", "Post", "Product"]
