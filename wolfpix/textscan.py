"""Substring search and word splitting used when reading pixmap text."""

from __future__ import annotations

import re

__all__ = ["find_substring", "find_unquoted", "split_words"]

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _until_nul(text: str) -> str:
    cut = text.find("\0")
    return text if cut < 0 else text[:cut]


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find_substring(text: str, needle: str, limit: int) -> int:
    """Index of ``needle`` in ``text`` (up to any NUL), or -1.

    Returns -1 straight away when ``needle`` is longer than ``limit``.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    return _until_nul(text).find(needle)


def find_unquoted(text: str, needle: str, limit: int) -> int:
    """Index of the first ``needle`` outside double-quoted parts, or -1.

    Each double quote toggles the quoted state before that position is
    tested, so a match may begin on a closing quote but not an opening one.
    """
    _check_needle(needle)
    if len(needle) > limit:
        return -1
    text = _until_nul(text)
    quoted = False
    for pos, ch in enumerate(text[: len(text) - len(needle) + 1]):
        if ch == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Words of ``text`` separated by spaces and tabs, up to any NUL."""
    return [word for word in _WORD_SEPARATORS.split(_until_nul(text)) if word]