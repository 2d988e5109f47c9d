"""Key codes and pointer handling for the first-person view."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

__all__ = ["WIDTH", "HEIGHT", "Key", "View", "pointer_motion"]

WIDTH = 1360
HEIGHT = 764


class Key(IntEnum):
    """Keyboard codes the view reacts to."""

    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 13
    ACCURACY = 49
    ESCAPE = 53
    W_LEFT = 123
    W_RIGHT = 124
    W_DOWN = 125
    W_UP = 126
    RUN = 257


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def pointer_motion(x: int, y: int, window_height: int) -> tuple[int, float]:
    """Horizon line and view angle for a pointer at (``x``, ``y``).

    Moving the pointer above the centre raises the horizon three times as
    fast; the horizon never goes below 0. The angle falls by one degree for
    every two pixels the pointer moves right.
    """
    if window_height < 0:
        raise ValueError("window_height must not be negative")
    half = window_height // 2
    mid = max(half + 3 * (half - y), 0)
    angle = _trunc_div(360 - x, 2)
    if angle >= 360:
        angle -= 360
    angle = int(math.fmod(angle, 360))
    return mid, float(angle)


@dataclass
class View:
    """Horizon and heading of the viewer, driven by pointer motion."""

    window_height: int = HEIGHT
    mid: Optional[int] = None
    angle: float = 0.0

    def __post_init__(self) -> None:
        if self.window_height < 0:
            raise ValueError("window_height must not be negative")
        if self.mid is None:
            self.mid = self.window_height // 2

    def on_pointer_motion(self, x: int, y: int) -> None:
        """Update horizon and angle for a new pointer position."""
        self.mid, self.angle = pointer_motion(x, y, self.window_height)