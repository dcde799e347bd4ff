"""
Fabricof - world/exploration.py
RevealTracker: permanent fog-of-war reveal for the landscape layer.
Tracks every landscape cell the character has ever been near.
"""

from typing import FrozenSet, Set, Tuple

DEFAULT_REVEAL_RADIUS = 6


class RevealTracker:
    def __init__(self, rows: int, cols: int, radius: int = DEFAULT_REVEAL_RADIUS):
        self.rows = rows
        self.cols = cols
        self.radius = radius
        # (row, col) landscape cells revealed so far. Append-only.
        self._revealed: Set[Tuple[int, int]] = set()

    def update(self, cell: Tuple[int, int]) -> int:
        """
        Reveals every in-bounds cell within the Chebyshev box around the
        character's (row, col) cell. Returns the number of newly revealed cells.
        """
        char_row, char_col = cell

        # Box clipped to the grid; nothing outside the bounds is ever tested.
        row_lo = max(0, char_row - self.radius)
        row_hi = min(self.rows, char_row + self.radius + 1)
        col_lo = max(0, char_col - self.radius)
        col_hi = min(self.cols, char_col + self.radius + 1)

        before = len(self._revealed)
        for row in range(row_lo, row_hi):
            for col in range(col_lo, col_hi):
                self._revealed.add((row, col))
        return len(self._revealed) - before

    def is_revealed(self, row: int, col: int) -> bool:
        """Returns True if the landscape cell has ever been revealed."""
        return (row, col) in self._revealed

    @property
    def revealed(self) -> FrozenSet[Tuple[int, int]]:
        return frozenset(self._revealed)

    def __len__(self) -> int:
        return len(self._revealed)
