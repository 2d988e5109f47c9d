"""Reading XPM pixmaps into 32-bit pixel arrays."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from .colors import text_to_rgb
from .textscan import find_substring, find_unquoted, split_words

__all__ = [
    "TRANSPARENT",
    "XpmError",
    "XpmImage",
    "color_key",
    "strip_comments",
    "extract_strings",
    "parse_xpm",
    "parse_xpm_text",
    "load_xpm",
]

TRANSPARENT = 0xFF000000
"""Pixel value given to the colour "None"."""

_PIXEL_MASK = 0xFFFFFFFF
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when pixmap data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded pixmap: row-major 32-bit pixel values."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match width and height")

    def pixel(self, x: int, y: int) -> int:
        """The pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) lies outside the image")
        return self.pixels[y * self.width + x]


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def color_key(chars: str) -> int:
    """Numeric key of the characters naming a colour, first character highest."""
    key = 0
    for ch in chars:
        key = (key << 8) + ord(ch)
    return key


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count :]


def strip_comments(text: str) -> str:
    """Replace C comments outside double quotes with spaces.

    The text keeps its length. A line comment is blanked together with the
    newline that ends it.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find_substring(text[begin + 2 :], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find_substring(text[begin + 2 :], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def extract_strings(text: str) -> Iterator[str]:
    """The contents of successive double-quoted strings in ``text``.

    Stops at the first quote that has no closing partner.
    """
    pos = 0
    while True:
        opening = find_substring(text[pos:], '"', len(text) - pos)
        if opening < 0:
            return
        start = pos + opening + 1
        closing = find_substring(text[start:], '"', len(text) - start)
        if closing < 0:
            return
        yield text[start : start + closing]
        pos = start + closing + 1


def _next_line(rows: Iterator[str]) -> str:
    line = next(rows, None)
    if line is None:
        raise XpmError("unexpected end of pixmap data")
    return line


def _pixel_value(rgb: int) -> int:
    return TRANSPARENT if rgb == -1 else rgb & _PIXEL_MASK


def _read_color(line: str, cpp: int) -> tuple[int, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        at = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' entry: {line!r}") from None
    if at >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end: Optional[str] = words[at + 1] if at + 1 < len(words) else None
    return color_key(line[:cpp]), text_to_rgb(words[at], end)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode pixmap strings: header, colour lines, then pixel rows."""
    rows = iter(lines)
    header = split_words(_next_line(rows))
    if len(header) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    for label, value in (
        ("width", width),
        ("height", height),
        ("colour count", ncolors),
        ("characters per pixel", cpp),
    ):
        if value <= 0:
            raise XpmError(f"invalid {label}: {value}")

    # Short keys use a direct table where later entries replace earlier
    # ones; longer keys use a search in which the first entry wins.
    direct = cpp <= 2
    palette: dict[int, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(_next_line(rows), cpp)
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    pixels: list[int] = []
    row_length = width * cpp
    for _ in range(height):
        line = _next_line(rows)
        if len(line) < row_length:
            raise XpmError(f"pixel row too short: {line!r}")
        pixels.extend(
            _pixel_value(palette.get(color_key(line[start : start + cpp]), 0))
            for start in range(0, row_length, cpp)
        )
    return XpmImage(width, height, tuple(pixels))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    return parse_xpm(extract_strings(strip_comments(text)))


def load_xpm(path: Union[str, os.PathLike[str]]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_bytes().decode("latin-1"))