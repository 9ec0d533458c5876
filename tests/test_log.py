import io
import re

import pytest

from whps import log
from whps.log import Logger, LogLevel

LINE = re.compile(r"^\[\d{4}-\d\d-\d\d \d\d:\d\d:\d\d\] (\w+): (.*)$")


def test_format_message_shape():
    logger = Logger(io.StringIO())
    message = logger.format_message(LogLevel.INFO, "res[%d]", 1)
    match = LINE.match(message)
    assert match is not None
    assert match.group(1) == "INFO"
    assert match.group(2) == "res[1]"


def test_format_without_args_keeps_percent():
    logger = Logger(io.StringIO())
    message = logger.format_message(LogLevel.WARN, "100% done")
    assert message.endswith("WARN: 100% done")


def test_log_writes_line_with_newline():
    stream = io.StringIO()
    logger = Logger(stream)
    returned = logger.log(LogLevel.ERROR, "bad %s", "thing")
    assert stream.getvalue() == returned + "\n"
    assert returned.endswith("ERROR: bad thing")


def test_debug_dropped_outside_debug_mode():
    stream = io.StringIO()
    logger = Logger(stream, debug_mode=False)
    assert logger.log(LogLevel.DEBUG, "hidden") is None
    assert stream.getvalue() == ""
    assert logger.log(LogLevel.INFO, "shown").endswith("INFO: shown")


def test_debug_kept_in_debug_mode():
    stream = io.StringIO()
    logger = Logger(stream, debug_mode=True)
    logger.log(LogLevel.DEBUG, "seen")
    assert stream.getvalue().rstrip("\n").endswith("DEBUG: seen")


def test_invalid_level_raises():
    logger = Logger(io.StringIO())
    with pytest.raises(ValueError):
        logger.log(99, "x")


def test_levels_are_ordered_and_named_in_messages():
    logger = Logger(io.StringIO())
    names = [
        LINE.match(logger.format_message(level, "x")).group(1)
        for level in sorted(LogLevel)
    ]
    assert names == ["TRACE", "DEBUG", "INFO", "WARN", "ERROR", "CRITICAL", "FATAL"]


@pytest.mark.parametrize(
    "func, name",
    [
        (log.info, "INFO"),
        (log.warn, "WARN"),
        (log.error, "ERROR"),
        (log.critical, "CRITICAL"),
        (log.fatal, "FATAL"),
        (log.debug, "DEBUG"),
    ],
)
def test_module_functions_write_to_stdout(capsys, func, name):
    func("value %d", 7)
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 1
    match = LINE.match(out[0])
    assert match.group(1) == name
    assert match.group(2) == "value 7"