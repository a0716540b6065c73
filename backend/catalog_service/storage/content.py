"""
Generic entity catalog: users, posts and products.

Unlike the library store, lookups and updates of missing records return
``None`` instead of raising, and deletes report a ``DeleteResult``.
"""
from threading import RLock
from typing import List, Optional

from catalog_service.core.logging import get_logger
from catalog_service.core.utils import IdPolicy
from catalog_service.models.content import Post, Product, User
from catalog_service.schemas.common import DeleteResult
from catalog_service.schemas.content import (
    PostCreate,
    PostUpdate,
    ProductCreate,
    ProductUpdate,
    UserCreate,
    UserUpdate,
)
from catalog_service.storage import seed
from catalog_service.storage.base import InMemoryRepository

logger = get_logger("storage.content")

REQUIRED_FIELDS = {
    "User": frozenset({"name", "email"}),
    "Post": frozenset({"title", "content", "published"}),
    "Product": frozenset({"name", "price", "stock"}),
}


class ContentStore:
    """Users, posts and products held in process memory."""

    def __init__(self, id_policy: IdPolicy = "monotonic", seed_data: bool = True):
        self._lock = RLock()
        self._users: InMemoryRepository[User] = InMemoryRepository("User", id_policy)
        self._posts: InMemoryRepository[Post] = InMemoryRepository("Post", id_policy)
        self._products: InMemoryRepository[Product] = InMemoryRepository("Product", id_policy)
        self._seed_data = seed_data
        if seed_data:
            self._load_seed()

    def _load_seed(self) -> None:
        for user in seed.content_users():
            self._users.load(user)
        for post in seed.content_posts():
            self._posts.load(post)
        for product in seed.content_products():
            self._products.load(product)

    def reset(self) -> None:
        """Drop every record and reload the sample data."""
        with self._lock:
            for repo in (self._users, self._posts, self._products):
                repo.clear()
            if self._seed_data:
                self._load_seed()
        logger.info("Content store reset")

    def _update(self, repo: InMemoryRepository, id: str, patch) -> Optional[object]:
        with self._lock:
            obj = repo.find(id)
            if obj is None:
                logger.debug("Update of unknown %s %s", repo.resource, id)
                return None
            required = REQUIRED_FIELDS[repo.resource]
            for key, value in patch.model_dump(exclude_unset=True).items():
                if value is None and key in required:
                    continue
                setattr(obj, key, value)
        logger.info("Updated %s %s", repo.resource, id)
        return obj

    def _delete(self, repo: InMemoryRepository, id: str) -> DeleteResult:
        with self._lock:
            removed = repo.delete(id)
        if not removed:
            return DeleteResult(success=False, message=f"{repo.resource} with ID {id} not found")
        logger.info("Deleted %s %s", repo.resource, id)
        return DeleteResult(success=True, message=f"{repo.resource} with ID {id} deleted successfully")

    # Users

    def list_users(self) -> List[User]:
        return self._users.list()

    def get_user(self, user_id: str) -> Optional[User]:
        return self._users.find(user_id)

    def create_user(self, data: UserCreate) -> User:
        with self._lock:
            user = self._users.create(lambda id: User(id=id, **data.model_dump()))
        logger.info("Created user %s", user.id)
        return user

    def update_user(self, user_id: str, patch: UserUpdate) -> Optional[User]:
        return self._update(self._users, user_id, patch)

    def delete_user(self, user_id: str) -> DeleteResult:
        # Posts keep their author id; Post.author resolves to None afterwards
        return self._delete(self._users, user_id)

    # Posts

    def list_posts(self, published: Optional[bool] = None) -> List[Post]:
        posts = self._posts.list()
        if published is None:
            return posts
        return [p for p in posts if p.published == published]

    def get_post(self, post_id: str) -> Optional[Post]:
        return self._posts.find(post_id)

    def posts_by_author(self, author_id: str) -> List[Post]:
        return [p for p in self._posts.list() if p.author_id == author_id]

    def post_author(self, post: Post) -> Optional[User]:
        return self._users.find(post.author_id)

    def create_post(self, data: PostCreate) -> Post:
        """Create a post; raises ``NotFoundError`` for an unknown author."""
        with self._lock:
            self._users.get(data.author_id)
            post = self._posts.create(lambda id: Post(id=id, **data.model_dump()))
        logger.info("Created post %s by user %s", post.id, post.author_id)
        return post

    def update_post(self, post_id: str, patch: PostUpdate) -> Optional[Post]:
        return self._update(self._posts, post_id, patch)

    def delete_post(self, post_id: str) -> DeleteResult:
        return self._delete(self._posts, post_id)

    # Products

    def list_products(self) -> List[Product]:
        return self._products.list()

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._products.find(product_id)

    def products_by_category(self, category: str) -> List[Product]:
        wanted = category.lower()
        return [
            p for p in self._products.list()
            if p.category is not None and p.category.lower() == wanted
        ]

    def search_products(self, name: str) -> List[Product]:
        term = name.lower()
        return [p for p in self._products.list() if term in p.name.lower()]

    def create_product(self, data: ProductCreate) -> Product:
        with self._lock:
            product = self._products.create(lambda id: Product(id=id, **data.model_dump()))
        logger.info("Created product %s (%r)", product.id, product.name)
        return product

    def update_product(self, product_id: str, patch: ProductUpdate) -> Optional[Product]:
        return self._update(self._products, product_id, patch)

    def delete_product(self, product_id: str) -> DeleteResult:
        return self._delete(self._products, product_id)
