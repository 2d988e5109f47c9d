# wolfpix

A small pure-Python toolkit for a textured raycaster. It has no
dependencies beyond the standard library.

| Module | What it holds |
| --- | --- |
| `wolfpix.xpm` | Decoding XPM pixmaps into rows of 32-bit pixel values |
| `wolfpix.colors` | X11 colour-name table and colour-specification lookup |
| `wolfpix.linereader` | Reading a text or binary stream line by line in fixed-size chunks |
| `wolfpix.textscan` | Substring search that skips double-quoted text, and word splitting |
| `wolfpix.strings`, `wolfpix.textops` | String helpers (`strncmp`, `strlcat`, `strsplit`, `strtrim`, ...) that keep the edge cases of the classic routines |
| `wolfpix.controls` | Key codes, and the horizon line and heading driven by the pointer |

## Installation

```
pip install .
```

## Decoding XPM images

```python
from wolfpix.xpm import XpmError, load_xpm, parse_xpm, parse_xpm_text

image = load_xpm("wall.xpm")          # reads the file as latin-1 text
print(image.width, image.height)
print(hex(image.pixel(0, 0)))

icon = parse_xpm([
    "2 1 2 1",
    "a c #ff0000",
    "b c None",
    "ab",
])
icon.pixel(0, 0)   # 0xff0000
icon.pixel(1, 0)   # 0xff000000, wolfpix.xpm.TRANSPARENT
```

`parse_xpm` takes the pixmap strings themselves: the header (width,
height, colour count, characters per pixel), the colour lines, then the
pixel rows. `parse_xpm_text` takes the whole text of an XPM file; it blanks
out comments that lie outside quotes (`strip_comments`) and then reads the
quoted strings in order (`extract_strings`). An `XpmImage` is a frozen
dataclass with `width`, `height` and a row-major `pixels` tuple;
`pixel(x, y)` raises `IndexError` outside the image.

Malformed data (a short header, a non-positive size, a colour line without
a `c` entry, a short pixel row, data that ends early) raises `XpmError`, a
subclass of `ValueError`. Pixel characters that match no colour line give
0, and colour names that are not in the table also give 0.

## Colour names

```python
from wolfpix.colors import NAMED_COLORS, lookup_color, text_to_rgb

lookup_color("DodgerBlue")      # 0x1e90ff (ASCII case is ignored)
lookup_color("none")            # -1
lookup_color("no such colour")  # None
text_to_rgb("#00ff00", None)    # 0x00ff00
text_to_rgb("light", "blue")    # 0xadd8e6, looked up as "light blue"
```

`NAMED_COLORS` is a read-only mapping of lower-case names to `0xRRGGBB`.

## Reading lines

```python
from wolfpix.linereader import LineReader, read_lines

with open("map.txt", "rb") as stream:
    for line in LineReader(stream, 4096):
        ...

with open("map.txt") as stream:
    lines = read_lines(stream)
```

Lines come back without their newline. A last line with no newline is
still returned; an empty tail is not.

## String helpers

Functions in `wolfpix.strings` and `wolfpix.textops` work on Python strings.
Searches (`strstr`, `strnstr`, `strrchr`) return an index or `None`;
`strlcat` returns the new string together with the length the full
concatenation would have had; `strsplit` drops empty pieces; `strtrim` and
`strtrim_white_space` treat every character at or below space as blank.

## View controls

```python
from wolfpix.controls import HEIGHT, Key, View, pointer_motion

view = View(window_height=HEIGHT)
view.on_pointer_motion(680, 300)
print(view.mid, view.angle)          # 628 -160.0

pointer_motion(680, 300, 764)        # (628, -160.0)
Key.RUN                              # 257
```

The horizon rises three pixels for every pixel the pointer sits above the
centre and never goes below 0; the heading falls one degree for every two
pixels the pointer moves right.

## What the package does not do

There is no window, event loop or renderer here: nothing draws walls,
casts rays, loads level maps or moves a player. `wolfpix.controls` only
computes view state from pointer positions and names the key codes.
Pixmaps are decoded, never written.

## Running the tests

```
pip install .[test]
pytest
```