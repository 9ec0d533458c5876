"""Worker threads that drain a shared task queue, and a pool of them."""

import threading
from typing import Callable, List, Optional

from . import log
from .task import TaskQueue

MAX_THREADS = 100

Task = Callable[[], object]


class WorkerThread:
    """A thread that runs tasks taken from a shared :class:`TaskQueue`."""

    def __init__(self, tasks: TaskQueue) -> None:
        self._tasks = tasks
        self._thread: Optional[threading.Thread] = None
        self._stopped = False

    def start(self, callback: Optional[Task] = None) -> None:
        """Start the thread running ``callback``, or the task loop when None."""
        self._stopped = False
        target = callback if callback is not None else self.work
        self._thread = threading.Thread(target=target, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Ask the task loop to finish after the current task."""
        self._stopped = True

    def join(self) -> None:
        """Stop the loop and wait for the thread to end.

        A thread blocked waiting for a task only ends once a task arrives or
        the queue is stopped.
        """
        self.stop()
        if self._thread is not None:
            self._thread.join()

    def run_one(self) -> bool:
        """Run one task from the queue; False when the queue has been stopped.

        An exception raised by the task is logged and does not propagate.
        """
        task = self._tasks.get()
        if task is None:
            return False
        try:
            task()
        except Exception as exc:
            log.info("WorkerThread.run_one %s", exc)
        return True

    def work(self) -> None:
        """Run tasks until stopped or until the queue is stopped."""
        while not self._stopped and self.run_one():
            pass


class ThreadPool:
    """A fixed number of worker threads sharing one task queue."""

    def __init__(self, size: int, callback: Optional[Task] = None) -> None:
        if size < 0:
            raise ValueError("thread count must not be negative")
        if size > MAX_THREADS:
            raise ValueError("too many threads")
        self._size = size
        self._callback = callback
        self._tasks = TaskQueue(size)
        self._threads: List[WorkerThread] = [WorkerThread(self._tasks) for _ in range(size)]

    def start(self) -> None:
        for thread in self._threads:
            thread.start(self._callback)

    def submit(self, task: Task) -> None:
        """Queue ``task`` for one of the workers."""
        self._tasks.add_task(task)

    def stop(self) -> None:
        """Stop the queue and all workers, and wait for them to end."""
        self._tasks.stop()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> "ThreadPool":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()