"""Building blocks for a small multi-threaded HTTP server: codec, strings, containers, heap, logging, task queue, threads, polling, sockets and config helpers."""

__version__ = "0.1.0"

__all__ = [
    "codec",
    "config",
    "containers",
    "heap",
    "log",
    "poller",
    "sockets",
    "strings",
    "task",
    "threads",
]