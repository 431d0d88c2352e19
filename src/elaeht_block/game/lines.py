from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .grid import Board, Coordinate


@dataclass(frozen=True)
class FullLines:
    rows: Tuple[int, ...] = ()
    cols: Tuple[int, ...] = ()

    @property
    def total(self) -> int:
        return len(self.rows) + len(self.cols)

    @property
    def is_combo(self) -> bool:
        return self.total > 1

    def __bool__(self) -> bool:
        return self.total > 0


def find_full_lines(board: Board) -> FullLines:
    """Find every completely filled row and column of ``board``.

    Rows and columns are evaluated against the same snapshot, so a cell on
    the crossing of a full row and a full column counts toward both.
    """
    filled = board.grid != 0
    full_rows = np.where(np.all(filled, axis=1))[0]
    full_cols = np.where(np.all(filled, axis=0))[0]
    return FullLines(
        rows=tuple(int(r) for r in full_rows),
        cols=tuple(int(c) for c in full_cols),
    )


def cells_of(lines: FullLines, size: int) -> List[Coordinate]:
    """Cells that clearing ``lines`` will empty, each listed once."""
    cells: List[Coordinate] = []
    seen = set()
    for r in lines.rows:
        for c in range(size):
            seen.add((r, c))
            cells.append((r, c))
    for c in lines.cols:
        for r in range(size):
            if (r, c) not in seen:
                cells.append((r, c))
    return cells


def clear_lines(board: Board, lines: FullLines) -> int:
    """Empty the listed rows and columns. Returns the number of cells emptied."""
    if not lines:
        return 0
    mask = np.zeros_like(board.grid, dtype=np.bool_)
    if lines.rows:
        mask[list(lines.rows), :] = True
    if lines.cols:
        mask[:, list(lines.cols)] = True
    cleared = int(np.count_nonzero(board.grid[mask]))
    board.grid[mask] = 0
    return cleared
