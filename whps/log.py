"""Levelled, time-stamped log lines written to a text stream."""

import sys
import threading
import time
from enum import IntEnum
from typing import Optional, TextIO

_TIME_FORMAT = "[%Y-%m-%d %H:%M:%S] "


class LogLevel(IntEnum):
    """Severity of a log line, from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    CRITICAL = 5
    FATAL = 6


class Logger:
    """Writes ``[date time] LEVEL: message`` lines to a stream.

    With ``stream`` left as None, lines go to whatever ``sys.stdout`` is at the
    time of writing. When ``debug_mode`` is false, DEBUG lines are dropped.
    """

    def __init__(self, stream: Optional[TextIO] = None, debug_mode: bool = True) -> None:
        self._stream = stream
        self.debug_mode = debug_mode
        self._lock = threading.Lock()

    def format_message(self, level: int, fmt: str, *args: object) -> str:
        """Build one log line (without the trailing newline).

        ``fmt`` is a printf-style format; with no ``args`` it is used verbatim.
        """
        level = LogLevel(level)
        stamp = time.strftime(_TIME_FORMAT, time.localtime())
        body = fmt % args if args else fmt
        return f"{stamp}{level.name}: {body}"

    def log(self, level: int, fmt: str, *args: object) -> Optional[str]:
        """Write one line at ``level``; return it, or None when it was dropped."""
        level = LogLevel(level)
        if level is LogLevel.DEBUG and not self.debug_mode:
            return None
        message = self.format_message(level, fmt, *args)
        stream = self._stream if self._stream is not None else sys.stdout
        with self._lock:
            stream.write(message + "\n")
            stream.flush()
        return message


_default = Logger()


def debug(fmt: str, *args: object) -> Optional[str]:
    return _default.log(LogLevel.DEBUG, fmt, *args)


def info(fmt: str, *args: object) -> Optional[str]:
    return _default.log(LogLevel.INFO, fmt, *args)


def warn(fmt: str, *args: object) -> Optional[str]:
    return _default.log(LogLevel.WARN, fmt, *args)


def error(fmt: str, *args: object) -> Optional[str]:
    return _default.log(LogLevel.ERROR, fmt, *args)


def critical(fmt: str, *args: object) -> Optional[str]:
    return _default.log(LogLevel.CRITICAL, fmt, *args)


def fatal(fmt: str, *args: object) -> Optional[str]:
    return _default.log(LogLevel.FATAL, fmt, *args)