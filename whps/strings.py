"""String helpers used when parsing requests and configuration lines."""


def split_once(text: str, sep: str) -> list[str]:
    """Split at the first ``sep``; an empty list when ``sep`` does not occur."""
    head, found, tail = text.partition(sep)
    return [head, tail] if found else []


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` at every ``sep``."""
    if not sep:
        raise ValueError("empty separator")
    return text.split(sep)


def strip(text: str, chars: str = " ") -> str:
    """Repeatedly find ``chars`` and drop the single character where it starts.

    For a one-character ``chars`` this removes every occurrence of it.
    """
    if not chars:
        raise ValueError("empty pattern")
    if len(chars) == 1:
        return text.replace(chars, "")
    while (pos := text.find(chars)) != -1:
        text = text[:pos] + text[pos + 1:]
    return text


def replace_first(text: str, old: str, new: str) -> str:
    """Replace the first occurrence of ``old`` with ``new``."""
    return text.replace(old, new, 1)


def replace_all(text: str, old: str, new: str) -> str:
    """Replace ``old`` with ``new`` until ``old`` no longer occurs."""
    if not old:
        raise ValueError("empty pattern")
    if old in new:
        raise ValueError("replacement contains the pattern and would never finish")
    while old in text:
        text = text.replace(old, new, 1)
    return text


def count(text: str, sub: str) -> int:
    """Count occurrences of ``sub``, overlapping ones included."""
    return sum(1 for pos in range(len(text) + 1) if text.startswith(sub, pos))


def contains(text: str, sub: str) -> bool:
    """Tell whether ``sub`` occurs in ``text``."""
    return sub in text