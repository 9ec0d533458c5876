"""An ordered list that always yields its smallest (or largest) item first."""

import threading
from typing import Any, Iterator


class OrderedHeap:
    """Keeps items sorted on insertion; equal items keep their insertion order.

    With ``reverse`` false the smallest item comes out first, otherwise the
    largest. Items need only support ``<`` (or ``>`` when reversed) and ``==``.
    """

    def __init__(self, reverse: bool = False) -> None:
        self._reverse = reverse
        self._items: list = []
        self._lock = threading.Lock()

    def _goes_before(self, item: Any, other: Any) -> bool:
        return item > other if self._reverse else item < other

    def push(self, item: Any) -> None:
        with self._lock:
            index = next(
                (i for i, other in enumerate(self._items) if self._goes_before(item, other)),
                len(self._items),
            )
            self._items.insert(index, item)

    def pop(self) -> Any:
        """Remove and return the first item, or None when empty."""
        with self._lock:
            return self._items.pop(0) if self._items else None

    def front(self) -> Any:
        """Return the first item; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("front of empty heap")
            return self._items[0]

    def remove(self, item: Any) -> bool:
        """Remove the first item equal to ``item``; report whether one was found."""
        with self._lock:
            for index, other in enumerate(self._items):
                if other == item:
                    del self._items[index]
                    return True
            return False

    def __contains__(self, item: Any) -> bool:
        with self._lock:
            return any(other == item for other in self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)