from __future__ import annotations

from elaeht_block.game import (
    Board,
    Piece,
    PieceColor,
    any_placement_exists,
    legal_anchors,
    make_shape,
    valid_placements,
)


def _piece(rows, piece_id: int = 1) -> Piece:
    return Piece(id=piece_id, shape=make_shape(rows), color=PieceColor.RED)


def _isolated_holes_board() -> Board:
    # Empty cells where (row + col) % 4 == 0: two per row and column, never adjacent.
    board = Board()
    for r in range(8):
        for c in range(8):
            board.grid[r, c] = 0 if (r + c) % 4 == 0 else 1
    return board


def test_no_placement_when_only_isolated_holes() -> None:
    board = _isolated_holes_board()
    pieces = [_piece([[1, 1]], 1), _piece([[1], [1]], 2), _piece([[1, 1], [1, 1]], 3)]
    assert not any_placement_exists(board, pieces)
    assert valid_placements(board, pieces) == []


def test_single_cell_fits_any_hole() -> None:
    board = _isolated_holes_board()
    assert any_placement_exists(board, [_piece([[1, 1]], 1), _piece([[1]], 2)])
    anchors = list(legal_anchors(board, make_shape([[1]])))
    assert len(anchors) == 16
    assert (0, 0) in anchors and (0, 4) in anchors


def test_empty_piece_list_has_no_placement() -> None:
    assert not any_placement_exists(Board(), [])


def test_valid_placements_enumerate_every_anchor() -> None:
    board = Board()
    line = _piece([[1, 1, 1, 1, 1]])
    placements = valid_placements(board, [line])
    assert len(placements) == 8 * 4
    assert (0, 7, 3) in placements
    assert all(slot == 0 for slot, _, _ in placements)
