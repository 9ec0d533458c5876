"""Readiness polling over file descriptors, with a bounded batch size and a timeout."""

import selectors
import time
from typing import List, Tuple

READ = selectors.EVENT_READ
WRITE = selectors.EVENT_WRITE

INVALID_TIMEOUT = None


class Poller:
    """Watches file descriptors for readiness.

    ``timeout`` is in milliseconds; a negative value waits without limit.
    At most ``max_events`` ready descriptors are reported by one :meth:`poll`.
    """

    def __init__(self, max_events: int = 1024, timeout: int = 100) -> None:
        if max_events <= 0:
            raise ValueError("max_events must be positive")
        self.max_events = max_events
        self.timeout = timeout
        self._selector = selectors.DefaultSelector()

    def _timeout_seconds(self):
        return None if self.timeout < 0 else self.timeout / 1000.0

    def poll(self) -> List[Tuple[int, int]]:
        """Wait for readiness and return ``(fd, events)`` pairs."""
        if not self._selector.get_map():
            seconds = self._timeout_seconds()
            if seconds is None:
                raise RuntimeError("waiting without limit on an empty poller")
            time.sleep(seconds)
            return []
        ready = self._selector.select(self._timeout_seconds())
        return [(key.fd, mask) for key, mask in ready[: self.max_events]]

    def add(self, fd: int, events: int) -> None:
        """Start watching ``fd``; raise KeyError when it is already watched."""
        self._selector.register(fd, events)

    def remove(self, fd: int) -> None:
        """Stop watching ``fd``; raise KeyError when it is not watched."""
        self._selector.unregister(fd)

    def modify(self, fd: int, events: int) -> None:
        """Change the events watched on ``fd``; raise KeyError when it is not watched."""
        self._selector.modify(fd, events)

    def set_timeout(self, timeout: int) -> None:
        """Set the wait timeout in milliseconds."""
        self.timeout = timeout

    def close(self) -> None:
        self._selector.close()

    def __enter__(self) -> "Poller":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()