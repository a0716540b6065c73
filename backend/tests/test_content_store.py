"""Content store tests: users, posts and products."""
import pytest

from catalog_service.core.exceptions import NotFoundError
from catalog_service.schemas.content import (
    PostCreate,
    PostUpdate,
    ProductCreate,
    ProductUpdate,
    UserCreate,
    UserUpdate,
)
from catalog_service.storage import ContentStore


def ids(records):
    return [r.id for r in records]


def test_seed_data(content_store: ContentStore):
    assert len(content_store.list_users()) == 2
    assert content_store.list_users()[0].name == "John Doe"
    assert len(content_store.list_posts()) == 3
    assert len(content_store.list_products()) == 3


def test_missing_user_is_none(content_store: ContentStore):
    assert content_store.get_user("999") is None


def test_posts_published_filter(content_store: ContentStore):
    published = content_store.list_posts(published=True)
    assert len(published) == 2
    assert all(p.published for p in published)
    assert ids(content_store.list_posts(published=False)) == ["2"]


def test_posts_by_author(content_store: ContentStore):
    posts = content_store.posts_by_author("1")
    assert len(posts) == 2
    assert all(p.author_id == "1" for p in posts)


def test_products_by_category_and_search(content_store: ContentStore):
    assert len(content_store.products_by_category("Electronics")) == 3
    assert len(content_store.products_by_category("electronics")) == 3
    assert [p.name for p in content_store.search_products("Lap")] == ["Laptop"]
    assert content_store.search_products("zzz") == []


def test_create_user(content_store: ContentStore):
    user = content_store.create_user(UserCreate(name="Ada", email="ada@example.com", age=36))
    assert user.id == "3"
    assert content_store.get_user("3") == user


def test_update_user(content_store: ContentStore):
    user = content_store.update_user("1", UserUpdate(email="johnny@example.com", age=0))
    assert user.email == "johnny@example.com"
    assert user.age == 0
    assert user.name == "John Doe"


def test_update_missing_records_return_none(content_store: ContentStore):
    assert content_store.update_user("99", UserUpdate(name="x")) is None
    assert content_store.update_post("99", PostUpdate(title="x")) is None
    assert content_store.update_product("99", ProductUpdate(stock=1)) is None


def test_delete_user_result(content_store: ContentStore):
    result = content_store.delete_user("2")
    assert result.success is True
    assert result.message == "User with ID 2 deleted successfully"
    missing = content_store.delete_user("2")
    assert missing.success is False
    assert missing.message == "User with ID 2 not found"


def test_post_author_is_none_after_author_deleted(content_store: ContentStore):
    post = content_store.get_post("3")
    assert content_store.post_author(post).name == "Jane Smith"
    content_store.delete_user("2")
    assert content_store.post_author(post) is None
    # The post itself survives
    assert content_store.get_post("3") is post


def test_create_post(content_store: ContentStore):
    post = content_store.create_post(PostCreate(title="Hello", content="World", author_id="2"))
    assert post.id == "4"
    assert post.published is False
    assert ids(content_store.posts_by_author("2")) == ["3", "4"]


def test_create_post_requires_existing_author(content_store: ContentStore):
    with pytest.raises(NotFoundError, match="User with ID 42 not found"):
        content_store.create_post(PostCreate(title="Hello", content="World", author_id="42"))
    assert len(content_store.list_posts()) == 3


def test_update_post(content_store: ContentStore):
    post = content_store.update_post("2", PostUpdate(published=True))
    assert post.published is True
    assert post.title == "Second Post"


def test_delete_post(content_store: ContentStore):
    assert content_store.delete_post("1").message == "Post with ID 1 deleted successfully"
    assert content_store.get_post("1") is None


def test_product_lifecycle(content_store: ContentStore):
    product = content_store.create_product(ProductCreate(name="Desk", price=120.5, stock=3, category="Furniture"))
    assert product.id == "4"
    updated = content_store.update_product("4", ProductUpdate(price=99.0, name=None, category=None))
    assert updated.price == 99.0
    assert updated.name == "Desk"
    assert updated.category is None
    assert content_store.delete_product("4").success is True
    assert content_store.delete_product("4").message == "Product with ID 4 not found"


def test_reset(content_store: ContentStore):
    content_store.delete_user("1")
    content_store.create_product(ProductCreate(name="Desk", price=1, stock=1))
    content_store.reset()
    assert ids(content_store.list_users()) == ["1", "2"]
    assert len(content_store.list_products()) == 3
