from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

from .grid import Board, Coordinate
from .pieces import Piece, Shape


def legal_anchors(board: Board, shape: Shape) -> Iterator[Coordinate]:
    h, w = shape.shape
    for row in range(board.size - h + 1):
        for col in range(board.size - w + 1):
            if board.is_legal_placement(shape, row, col):
                yield row, col


def any_placement_exists(board: Board, pieces: Iterable[Piece]) -> bool:
    """Return True as soon as any piece has a legal anchor on ``board``."""
    for piece in pieces:
        for _ in legal_anchors(board, piece.shape):
            return True
    return False


def valid_placements(board: Board, pieces: Iterable[Piece]) -> List[Tuple[int, int, int]]:
    """List of (slot, row, col) for every legal placement of the ordered pieces."""
    actions: List[Tuple[int, int, int]] = []
    for slot, piece in enumerate(pieces):
        for row, col in legal_anchors(board, piece.shape):
            actions.append((slot, row, col))
    return actions
