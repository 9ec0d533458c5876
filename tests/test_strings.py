import pytest

from whps import strings


def test_split_once_found():
    assert strings.split_once("Host: a:b", ": ") == ["Host", "a:b"]


def test_split_once_missing():
    assert strings.split_once("abc", "=") == []


def test_split_rejoins():
    text = "GET / HTTP/1.1\r\nHost: x\r\n\r\nbody"
    parts = strings.split(text, "\r\n")
    assert "\r\n".join(parts) == text
    assert parts[0] == "GET / HTTP/1.1"


def test_split_without_separator_gives_whole():
    assert strings.split("abc", ",") == ["abc"]


def test_split_empty_separator():
    with pytest.raises(ValueError):
        strings.split("abc", "")


def test_strip_default_removes_spaces():
    assert strings.strip(" a b  c ") == "abc"


def test_strip_single_char():
    assert strings.strip("a\rb\r", "\r") == "ab"


def test_strip_multi_char_removes_leading_char_each_match():
    result = strings.strip("xabab", "ab")
    assert "ab" not in result
    assert result.startswith("x")


def test_strip_empty_pattern():
    with pytest.raises(ValueError):
        strings.strip("abc", "")


def test_replace_first_only_once():
    assert strings.replace_first("a-a-a", "-", "+") == "a+a-a"


def test_replace_all_until_gone():
    result = strings.replace_all("aaaa", "aa", "a")
    assert "aa" not in result
    assert result == "a"


def test_replace_all_rejects_self_containing_replacement():
    with pytest.raises(ValueError):
        strings.replace_all("a", "a", "aa")


def test_count_overlapping():
    assert strings.count("aaa", "aa") == 2
    assert strings.count("abc", "z") == 0


def test_count_empty_sub_counts_every_position():
    assert strings.count("abc", "") == len("abc") + 1


def test_contains():
    assert strings.contains("keep-alive", "alive") is True
    assert strings.contains("close", "alive") is False