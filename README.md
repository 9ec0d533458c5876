# whps

Building blocks for a small, multi-threaded HTTP server. Each module can be used
on its own and needs nothing beyond the standard library.

- `whps.codec`: URL (form) encoding. `url_encode` percent-encodes the UTF-8 bytes
  of a string and turns spaces into `+`. `url_decode` reverses this, and a truncated
  `%` escape ends the result. `encode` / `decode` dispatch on a kind: `"utf-8"`
  returns the text unchanged, `"UrlCode"` uses the URL codec, and any other kind
  logs a warning and returns the text unchanged.
- `whps.strings`: helpers for parsing request and configuration lines. They are
  `split_once`, which returns an empty list when the separator is absent, `split`,
  `strip`, `replace_first`, `replace_all`, `count`, which counts overlapping
  matches, and `contains`.
- `whps.containers`: lock-protected `SafeList`, `SafeMap` and `SafeQueue`. `SafeMap.insert`
  never overwrites an existing key. `SafeList.front` returns `None` when the list is empty.
  `SafeQueue.front` and `SafeQueue.pop` raise `IndexError` when the queue is empty.
- `whps.heap`: `OrderedHeap`, a thread-safe collection kept sorted on insertion.
  It gives the smallest item first, or the largest with `reverse=True`. Equal items
  keep their insertion order. `pop` returns `None` when the heap is empty.
- `whps.log`: `Logger` writes lines of the form `[YYYY-mm-dd HH:MM:SS] LEVEL: message`
  to a stream, which defaults to standard output. A `LogLevel` runs from `TRACE` to
  `FATAL`. With `debug_mode=False`, DEBUG lines are dropped. The module-level functions
  `debug`, `info`, `warn`, `error`, `critical` and `fatal` use a shared default logger.
  Messages take printf-style `%` arguments.
- `whps.task`: `TaskQueue`, a blocking producer/consumer FIFO. `get` waits for a task.
  After `stop`, every waiting call and every later call to `get` returns `None`.
- `whps.threads`: `WorkerThread` and `ThreadPool`, at most 100 threads, run callables
  from a shared `TaskQueue`. If a task raises an exception, the exception is logged
  and does not propagate. `ThreadPool` works as a context manager: it starts on
  entry and stops on exit.
- `whps.poller`: `Poller` watches file descriptors for readiness with `READ` / `WRITE`
  events. It takes a timeout in milliseconds, where a negative value means no limit,
  and caps how many events one `poll` returns.
- `whps.sockets`: `Socket` holds a TCP socket. It covers the usual server setup steps:
  `create`, `set_options` (keep-alive and no Nagle), `set_nonblocking`, `set_reuse_addr`,
  `bind`, `listen`, `accept` and `close`. Operations on an invalid socket raise `OSError`.
- `whps.config`: `find_section` returns the name of a `[section]` line read with its
  line ending, such as `"[whps]\n"`, or `""` for any other line.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

URL codec:

```python
from whps.codec import url_encode, url_decode

url_encode("a b&c")      # 'a+b%26c'
url_decode("a+b%26c")    # 'a b&c'
```

String helpers:

```python
from whps.strings import split_once, split

split_once("Host: example.com", ": ")   # ['Host', 'example.com']
split("a,b,,c", ",")                    # ['a', 'b', '', 'c']
```

A thread pool working off a shared task queue:

```python
import threading
from whps.threads import ThreadPool

done = threading.Event()
with ThreadPool(4) as pool:
    pool.submit(done.set)
    done.wait()
```

Stopping a pool stops its queue, so tasks still waiting in the queue are not run.
Wait for the work you need before leaving the `with` block or calling `stop`.

An ordered heap:

```python
from whps.heap import OrderedHeap

heap = OrderedHeap()
for value in (5, 1, 3):
    heap.push(value)
heap.pop()   # 1
```

## What this package does not do

The package provides parts a server is built from, not a server. It has no HTTP
request parser, no response writer, no connection or session handling, no TLS, no
command to start a server, and no reader for configuration files. `find_section`
only recognises section header lines.