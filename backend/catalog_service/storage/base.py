from typing import Callable, Generic, List, Optional, TypeVar

from catalog_service.core.exceptions import NotFoundError
from catalog_service.core.utils import IdPolicy, make_id_generator

T = TypeVar('T')


class InMemoryRepository(Generic[T]):
    """
    List-based in-memory repository, kept in insertion order.

    Lookups return the first record with a matching id and deletes remove
    every record with that id, so the legacy ``length`` id policy behaves
    the same way it always did when it hands out an id twice.

    Callers are expected to hold their store's lock around mutations.
    """
    def __init__(self, resource: str, id_policy: IdPolicy = "monotonic"):
        self.resource = resource
        self._storage: List[T] = []
        self._id_gen = make_id_generator(id_policy, lambda: len(self._storage))

    def __len__(self) -> int:
        return len(self._storage)

    def __contains__(self, id: str) -> bool:
        return self.find(id) is not None

    def create(self, build: Callable[[str], T]) -> T:
        """Build a record with the next id and store it."""
        obj = build(self._id_gen.next_id())
        self._storage.append(obj)
        return obj

    def load(self, obj: T) -> T:
        """Store a record whose id was chosen by the caller (seeding)."""
        self._storage.append(obj)
        self._id_gen.advance_past(obj.id)
        return obj

    def get(self, id: str) -> T:
        obj = self.find(id)
        if obj is None:
            raise NotFoundError(self.resource, id)
        return obj

    def find(self, id: str) -> Optional[T]:
        for item in self._storage:
            if item.id == id:
                return item
        return None

    def delete(self, id: str) -> bool:
        before = len(self._storage)
        self._storage = [item for item in self._storage if item.id != id]
        return len(self._storage) < before

    def list(self) -> List[T]:
        return list(self._storage)

    def clear(self) -> None:
        self._storage = []
        self._id_gen.reset()
