"""Small lock-protected containers shared between threads."""

import threading
from collections import deque
from typing import Any, Iterable, Iterator


class SafeList:
    """A list guarded by a lock, used as a FIFO of pending items."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items = list(items)
        self._lock = threading.Lock()

    def append(self, item: Any) -> None:
        with self._lock:
            self._items.append(item)

    def front(self) -> Any:
        """Return the first item, or None when empty."""
        with self._lock:
            return self._items[0] if self._items else None

    def pop_front(self) -> None:
        """Drop the first item; does nothing when empty."""
        with self._lock:
            if self._items:
                del self._items[0]

    def remove(self, item: Any) -> bool:
        """Remove the first item equal to ``item``; report whether one was found."""
        with self._lock:
            try:
                self._items.remove(item)
            except ValueError:
                return False
            return True

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)


class SafeMap:
    """A dict guarded by a lock; ``insert`` never overwrites an existing key."""

    def __init__(self) -> None:
        self._data: dict = {}
        self._lock = threading.Lock()

    def insert(self, key: Any, value: Any) -> bool:
        """Add ``key`` unless present; report whether it was added."""
        with self._lock:
            if key in self._data:
                return False
            self._data[key] = value
            return True

    def erase(self, key: Any) -> None:
        with self._lock:
            self._data.pop(key, None)

    def get(self, key: Any, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def at(self, key: Any) -> Any:
        """Return the value for ``key``; raise KeyError when missing."""
        with self._lock:
            return self._data[key]

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __getitem__(self, key: Any) -> Any:
        return self.at(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def __contains__(self, key: Any) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class SafeQueue:
    """A FIFO queue guarded by a lock."""

    def __init__(self) -> None:
        self._items: deque = deque()
        self._lock = threading.Lock()

    def push(self, item: Any) -> None:
        with self._lock:
            self._items.append(item)

    def front(self) -> Any:
        """Return the oldest item; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("front of empty queue")
            return self._items[0]

    def pop(self) -> Any:
        """Remove and return the oldest item; raise IndexError when empty."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from empty queue")
            return self._items.popleft()

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)