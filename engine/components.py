"""
Fabricof - engine/components.py
Scene Component Definitions: glyph grids and the character sprite.
==================================================================
Version:     0.2
Stack:       Python 3.11+ | numpy
Status:      Shared data model for the compositor and reveal tracker.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

import numpy as np

BLANK = ord(" ")


class SpriteCoordinateError(ArithmeticError):
    """Raised when a sprite position cannot be mapped to an integer cell."""


@dataclass(frozen=True)
class Grid:
    """
    Fixed-size glyph grid. `ch[row, col]` holds a Unicode code point, the same
    layout a console uses. Blank cells are transparent.
    """
    ch: np.ndarray

    @classmethod
    def from_lines(cls, lines: Sequence[str], rows: int, cols: int) -> Grid:
        ch = np.full((rows, cols), BLANK, dtype=np.int32)
        for row, line in enumerate(lines[:rows]):
            for col, glyph in enumerate(line[:cols]):
                ch[row, col] = ord(glyph)
        return cls(ch)

    @property
    def rows(self) -> int:
        return self.ch.shape[0]

    @property
    def cols(self) -> int:
        return self.ch.shape[1]

    def glyph(self, row: int, col: int) -> str:
        return chr(self.ch[row, col])

    def is_blank(self, row: int, col: int) -> bool:
        return bool(self.ch[row, col] == BLANK)

    def opaque_cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yields (row, col, glyph) for every non-blank cell in row-major order."""
        for row, col in np.argwhere(self.ch != BLANK):
            yield int(row), int(col), chr(self.ch[row, col])


@dataclass
class CharacterSprite:
    """
    Sprite glyph rows plus a logical position in cell units.
    x accumulates fractional movement; draws happen at the floored cell.
    """
    rows: List[str]
    x: float = 0.0
    y: float = 0.0
    width: int = field(init=False)

    def __post_init__(self) -> None:
        self.width = max((len(line) for line in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def cell(self) -> Tuple[int, int]:
        """Returns the (row, col) of the sprite origin."""
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise SpriteCoordinateError(f"Sprite position is not finite: ({self.x}, {self.y})")
        return math.floor(self.y), math.floor(self.x)

    def move(self, dx: float, dy: float = 0.0) -> None:
        self.x += dx
        self.y += dy

    def cells(self) -> Iterator[Tuple[int, int, str]]:
        """Yields (row, col, glyph) in logical grid coordinates for non-blank glyphs."""
        origin_row, origin_col = self.cell()
        for dy, line in enumerate(self.rows):
            for dx, glyph in enumerate(line):
                if glyph == " ":
                    continue
                yield origin_row + dy, origin_col + dx, glyph
