import threading
from functools import partial
from queue import Queue

import pytest

from whps.task import TaskQueue
from whps.threads import ThreadPool, WorkerThread


def test_pool_runs_all_submitted_tasks():
    done = Queue()
    total = 20

    pool = ThreadPool(4)
    pool.start()
    for n in range(total):
        pool.submit(partial(done.put, n))
    collected = sorted(done.get(timeout=5) for _ in range(total))
    pool.stop()
    assert collected == list(range(total))


def test_pool_context_manager_stops_threads():
    finished = threading.Event()
    with ThreadPool(2) as pool:
        pool.submit(finished.set)
        assert finished.wait(timeout=5)
    assert finished.is_set()


def test_pool_rejects_too_many_threads():
    with pytest.raises(ValueError):
        ThreadPool(101)


def test_pool_rejects_negative_size():
    with pytest.raises(ValueError):
        ThreadPool(-1)


def test_pool_with_callback_runs_it_per_thread():
    calls = Queue()

    pool = ThreadPool(3, partial(calls.put, "called"))
    pool.start()
    pool.stop()
    assert calls.qsize() == 3
    assert [calls.get(timeout=5) for _ in range(3)] == ["called"] * 3


def test_run_one_swallows_task_errors(capsys):
    queue = TaskQueue(1)

    def boom():
        raise RuntimeError("broken")

    queue.add_task(boom)
    worker = WorkerThread(queue)
    assert worker.run_one() is True
    assert "broken" in capsys.readouterr().out


def test_run_one_false_after_queue_stopped():
    queue = TaskQueue(1)
    queue.stop()
    assert WorkerThread(queue).run_one() is False


def test_work_ends_when_queue_stopped():
    queue = TaskQueue(1)
    ran = []
    queue.add_task(lambda: ran.append(1))
    worker = WorkerThread(queue)
    worker.start()
    queue.add_task(queue.stop)
    worker.join()
    assert ran == [1]


def test_start_with_callback_runs_callback():
    queue = TaskQueue(1)
    ran = threading.Event()
    worker = WorkerThread(queue)
    worker.start(ran.set)
    worker.join()
    assert ran.is_set()
    assert len(queue) == 0