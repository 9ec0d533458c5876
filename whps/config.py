"""Helpers for section-style configuration files (``[section]`` then ``key=value``)."""


def find_section(line: str) -> str:
    """Return the section name of a line read with its line ending, else ``""``.

    The line must start with ``[`` and have ``]`` just before its final
    character, as in ``"[whps]\\n"``.
    """
    if len(line) >= 2 and line[0] == "[" and line[-2] == "]":
        return line[1:-2]
    return ""