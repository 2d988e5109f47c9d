"""Searching, splitting, trimming and case helpers for plain strings."""

from __future__ import annotations

from typing import Optional, Union

__all__ = [
    "strnstr",
    "strrchr",
    "strsort",
    "strsplit",
    "strstr",
    "strsub",
    "strtrim",
    "strtrim_letter",
    "strtrim_white_space",
    "tolower",
    "toupper",
]

_MAX_DISTINCT_LETTERS = 27

CharOrCode = Union[str, int]


def _is_blank(ch: str) -> bool:
    return ch <= " "


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly in the first ``n`` characters.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if not needle:
        return 0
    index = haystack[: max(n, 0)].find(needle)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``s``.

    Searching for the NUL character yields ``len(s)``, the position of the
    terminator. Returns None when ``c`` does not occur.
    """
    if c == "\0":
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strsort(s: Optional[str]) -> Optional[str]:
    """The characters of ``s`` in ascending order; None stays None."""
    if s is None:
        return None
    return "".join(sorted(s))


def strsplit(s: str, c: str) -> list[str]:
    """Split ``s`` on the delimiter ``c``, dropping empty pieces."""
    return [word for word in s.split(c) if word]


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; 0 for an empty needle."""
    index = haystack.find(needle)
    return None if index < 0 else index


def strsub(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` starting at ``start``.

    Returns None when ``s`` is None or ``length`` is zero.
    """
    if s is None or not length:
        return None
    if start < 0 or start > len(s):
        raise IndexError("start lies outside the string")
    if length < 0:
        raise ValueError("length must not be negative")
    return s[start : start + length]


def strtrim(s: str) -> Optional[str]:
    """``s`` without leading and trailing characters at or below space.

    A string made only of such characters trims to nothing, reported as None.
    """
    start = 0
    end = len(s)
    while start < end and _is_blank(s[start]):
        start += 1
    while end > start and _is_blank(s[end - 1]):
        end -= 1
    return strsub(s, start, end - start)


def strtrim_letter(s: Optional[str]) -> Optional[str]:
    """Each distinct character of ``s`` once, in order of first appearance.

    At most 27 distinct characters are supported.
    """
    if s is None:
        return None
    distinct = "".join(dict.fromkeys(s))
    if len(distinct) > _MAX_DISTINCT_LETTERS:
        raise ValueError(
            f"more than {_MAX_DISTINCT_LETTERS} distinct characters"
        )
    return distinct


def strtrim_white_space(s: Optional[str]) -> Optional[str]:
    """``s`` with every character at or below space removed."""
    if s is None:
        return None
    return "".join(ch for ch in s if not _is_blank(ch))


def _shift_range(c: CharOrCode, low: str, high: str, delta: int) -> CharOrCode:
    code = ord(c) if isinstance(c, str) else c
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharOrCode) -> CharOrCode:
    """Lower-case an ASCII letter, given as a character or a character code."""
    return _shift_range(c, "A", "Z", 32)


def toupper(c: CharOrCode) -> CharOrCode:
    """Upper-case an ASCII letter, given as a character or a character code."""
    return _shift_range(c, "a", "z", -32)