"""
Fabricof - engine/viewport.py
Maps the fixed logical grid onto the physical window.
"""

from __future__ import annotations

from typing import List, Tuple

BASE_WIDTH = 320
BASE_HEIGHT = 200
CELL_WIDTH = 8
CELL_HEIGHT = 8

Rect = Tuple[int, int, int, int]


class ViewportScaler:
    """
    Stretches the logical base resolution to the window, each axis independently.
    Rectangles are truncated toward zero, not rounded.
    """
    def __init__(
        self,
        width: int,
        height: int,
        base_width: int = BASE_WIDTH,
        base_height: int = BASE_HEIGHT,
        cell_width: int = CELL_WIDTH,
        cell_height: int = CELL_HEIGHT,
    ):
        self.base_width = base_width
        self.base_height = base_height
        self.cell_width = cell_width
        self.cell_height = cell_height
        self.width = 0
        self.height = 0
        self.scale_x = 0.0
        self.scale_y = 0.0
        self.resize(width, height)

    def resize(self, width: int, height: int) -> None:
        """Recomputes the scale factors. Only called when the window changed."""
        self.width = width
        self.height = height
        self.scale_x = width / self.base_width
        self.scale_y = height / self.base_height

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def cell_rect(self, row: int, col: int) -> Rect:
        """Destination (x, y, w, h) in window pixels for a logical cell."""
        return (
            int(col * self.cell_width * self.scale_x),
            int(row * self.cell_height * self.scale_y),
            int(self.cell_width * self.scale_x),
            int(self.cell_height * self.scale_y),
        )


def window_size_candidates(
    screen_width: int,
    screen_height: int,
    base_width: int = BASE_WIDTH,
    base_height: int = BASE_HEIGHT,
) -> List[Tuple[int, int]]:
    """Whole multiples of the base resolution that fit on the screen."""
    sizes: List[Tuple[int, int]] = []
    factor = 1
    while base_width * factor <= screen_width and base_height * factor <= screen_height:
        sizes.append((base_width * factor, base_height * factor))
        factor += 1

    # At least two entries, even on displays smaller than 2x base.
    if len(sizes) < 2:
        sizes.append((base_width, base_height))
    return sizes
