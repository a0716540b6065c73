"""Id generation policies for the in-memory stores."""
from threading import Lock
from typing import Callable, Literal

IdPolicy = Literal["monotonic", "length"]


class IDGenerator:
    """
    Thread-safe monotonic id generator producing string ids.

    Ids are never reused, even after the record they were given to is
    deleted.
    """
    def __init__(self, start: int = 1):
        self._lock = Lock()
        self._start = start
        self._current = start - 1

    def next_id(self) -> str:
        """
        Returns the next unique id.
        """
        with self._lock:
            self._current += 1
            return str(self._current)

    def advance_past(self, value: str) -> None:
        """
        Make sure ids handed out later are greater than ``value``.
        """
        with self._lock:
            self._current = max(self._current, int(value))

    def reset(self) -> None:
        with self._lock:
            self._current = self._start - 1


class LengthIDGenerator:
    """
    Legacy policy: the new id is the collection size plus one.

    Deleting a record and adding another can hand out an id that is still
    in use, so this only exists for clients relying on the old numbering.
    """
    def __init__(self, size: Callable[[], int]):
        self._size = size

    def next_id(self) -> str:
        return str(self._size() + 1)

    def advance_past(self, value: str) -> None:
        pass

    def reset(self) -> None:
        pass


def make_id_generator(policy: IdPolicy, size: Callable[[], int]):
    """Build the id generator for a collection whose size is reported by ``size``."""
    if policy == "length":
        return LengthIDGenerator(size)
    if policy == "monotonic":
        return IDGenerator()
    raise ValueError(f"Unknown id policy: {policy}")
