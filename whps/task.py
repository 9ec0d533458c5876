"""A blocking FIFO of tasks shared between producer and consumer threads."""

import threading
from collections import deque
from typing import Any, Optional


class TaskQueue:
    """Producers add tasks; consumers block in :meth:`get` until one arrives.

    ``users`` is the number of consumer threads sharing the queue. Once
    :meth:`stop` is called every waiting and later :meth:`get` returns None.
    """

    def __init__(self, users: int = 1) -> None:
        self.users = users
        self._tasks: deque = deque()
        self._stopped = False
        self._cond = threading.Condition()

    def add_task(self, task: Any) -> None:
        with self._cond:
            self._tasks.append(task)
            self._cond.notify()

    def get(self) -> Optional[Any]:
        """Take the oldest task, waiting for one; None once the queue is stopped."""
        with self._cond:
            while not self._tasks and not self._stopped:
                self._cond.wait()
            if self._stopped:
                return None
            return self._tasks.popleft()

    def stop(self) -> None:
        """Stop handing out tasks and wake every waiting consumer."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()

    def __len__(self) -> int:
        with self._cond:
            return len(self._tasks)