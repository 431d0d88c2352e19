from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from .errors import InvalidMove, MoveRejection
from .pieces import Shape


BOARD_SIZE = 8

Coordinate = Tuple[int, int]


class Board:
    """Square grid of cells for piece placement.

    The grid uses 0 for empty cells and positive integers for filled cells.
    A filled cell holds the color token of the piece that covered it; once
    placed, a piece dissolves into independent cells.
    """

    def __init__(self, size: int = BOARD_SIZE) -> None:
        self.size = int(size)
        self.grid = np.zeros((self.size, self.size), dtype=np.int8)

    @classmethod
    def from_array(cls, cells: Sequence[Sequence[int]]) -> "Board":
        arr = np.array(cells, dtype=np.int8)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ValueError(f"board must be square, got shape {arr.shape}")
        board = cls(arr.shape[0])
        board.grid[:, :] = arr
        return board

    def reset(self) -> None:
        self.grid.fill(0)

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def fits_inside(self, shape: Shape, row: int, col: int) -> bool:
        """Check that every occupied offset of ``shape`` lands on the board."""
        rows, cols = np.nonzero(shape)
        rows = rows + row
        cols = cols + col
        return bool(
            np.all(rows >= 0) and np.all(rows < self.size)
            and np.all(cols >= 0) and np.all(cols < self.size)
        )

    def is_legal_placement(self, shape: Shape, row: int, col: int) -> bool:
        """Check whether ``shape`` can be placed with its top-left at (row, col).

        Only occupied offsets are tested; empty offsets of the shape may hang
        off the board or cover filled cells.
        """
        if not self.fits_inside(shape, row, col):
            return False
        rows, cols = np.nonzero(shape)
        return not bool(np.any(self.grid[rows + row, cols + col]))

    def place(self, shape: Shape, row: int, col: int, value: int) -> int:
        """Write ``value`` into every cell covered by ``shape``.

        Returns the number of cells filled. Raises InvalidMove when the
        placement is not legal, leaving the grid untouched.
        """
        if not self.fits_inside(shape, row, col):
            raise InvalidMove(MoveRejection.OUT_OF_BOUNDS, f"shape does not fit at ({row}, {col})")
        if not self.is_legal_placement(shape, row, col):
            raise InvalidMove(MoveRejection.OCCUPIED, f"cells at ({row}, {col}) are occupied")
        rows, cols = np.nonzero(shape)
        self.grid[rows + row, cols + col] = value
        return int(rows.size)

    def clamped_anchor(self, shape: Shape, row: int, col: int) -> Coordinate:
        """Clamp a desired anchor so the shape's bounding box stays on the board."""
        h, w = shape.shape
        clamped_row = max(0, min(int(row), self.size - h))
        clamped_col = max(0, min(int(col), self.size - w))
        return clamped_row, clamped_col

    def anchor_for_drop(self, shape: Shape, drop_row: int, drop_col: int) -> Coordinate:
        # Center the shape on the cell under the pointer.
        h, w = shape.shape
        return self.clamped_anchor(shape, drop_row - h // 2, drop_col - w // 2)

    def filled_ratio(self) -> float:
        return float(np.count_nonzero(self.grid)) / float(self.size * self.size)

    def copy(self) -> "Board":
        new_board = Board(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def clone_state(self) -> np.ndarray:
        return self.grid.copy()

    def __str__(self) -> str:
        return "\n".join("".join("█" if cell else "·" for cell in row) for row in self.grid)

