"""Small string helpers with C-library style semantics on Python strings."""

from __future__ import annotations

from typing import Callable, Optional

__all__ = [
    "striter",
    "striteri",
    "strjoin",
    "strlcat",
    "strlen_esp",
    "strmap",
    "strmapi",
    "strncat",
    "strncmp",
    "strncpy",
    "strndup",
    "strnequ",
    "strnew",
]

_NUL = "\0"


def _until_nul(text: str) -> str:
    """Return ``text`` cut at its first NUL character."""
    cut = text.find(_NUL)
    return text if cut < 0 else text[:cut]


def _code_at(text: str, index: int) -> int:
    """Character code at ``index``, or 0 past the end of ``text``."""
    return ord(text[index]) if index < len(text) else 0


def striter(s: Optional[str], f: Optional[Callable[[str], object]]) -> None:
    """Call ``f`` on every character of ``s``; nothing happens if either is None."""
    if s is None or f is None:
        return
    for ch in s:
        f(ch)


def striteri(s: Optional[str], f: Optional[Callable[[int, str], object]]) -> None:
    """Call ``f(index, char)`` on every character of ``s``; nothing if either is None."""
    if s is None or f is None:
        return
    for index, ch in enumerate(s):
        f(index, ch)


def strjoin(s1: Optional[str], s2: Optional[str]) -> Optional[str]:
    """Concatenate two strings, or return None if either one is missing."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting string and the length the full concatenation would
    have had. When ``size`` is smaller than ``dst``, ``dst`` is left unchanged
    and the reported length is ``len(src) + size``.
    """
    len_dst = len(dst)
    len_src = len(src)
    if size < len_dst:
        return dst, len_src + size
    room = max(size - len_dst - 1, 0)
    return dst + src[:room], len_dst + len_src


def strlen_esp(s: str) -> int:
    """Length of the leading run of characters above the space character."""
    count = 0
    for ch in s:
        if ch <= " ":
            break
        count += 1
    return count


def strmap(s: Optional[str], f: Optional[Callable[[str], str]]) -> Optional[str]:
    """Map ``f`` over the characters of ``s``; the result stops at a NUL."""
    if s is None or f is None:
        return None
    return _until_nul("".join(f(ch) for ch in s))


def strmapi(
    s: Optional[str], f: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Map ``f(index, char)`` over ``s``; the result stops at a NUL."""
    if s is None or f is None:
        return None
    return _until_nul("".join(f(i, ch) for i, ch in enumerate(s)))


def strncat(s1: str, s2: str, n: int) -> str:
    """Append at most ``n`` characters of ``s2`` to ``s1``."""
    return s1 + s2[: max(n, 0)]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; returns the difference of the first
    mismatching character codes, 0 when equal."""
    if n <= 0:
        return 0
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    index = min(len(s1), len(s2), n)
    if index == n:
        return 0
    return _code_at(s1, index) - _code_at(s2, index)


def strncpy(src: str, n: int) -> str:
    """Exactly ``n`` characters: ``src`` truncated or padded with NULs."""
    if n < 0:
        raise ValueError("length must not be negative")
    return src[:n].ljust(n, _NUL)


def strndup(s: str, n: int) -> str:
    """Copy of at most the first ``n`` characters of ``s``."""
    if n < 0:
        raise ValueError("length must not be negative")
    return s[:n]


def strnequ(s1: str, s2: str, n: int) -> bool:
    """True when the first ``n`` characters of both strings are equal."""
    return strncmp(s1, s2, n) == 0


def strnew(size: int) -> str:
    """A string of ``size`` NUL characters."""
    if size < 0:
        raise ValueError("size must not be negative")
    return _NUL * size