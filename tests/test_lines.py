from __future__ import annotations

from elaeht_block.game import Board, FullLines, ScoringRules, cells_of, clear_lines, find_full_lines


def test_no_full_lines_on_partial_board() -> None:
    board = Board()
    board.grid[0, :7] = 1
    board.grid[:7, 3] = 1
    lines = find_full_lines(board)
    assert lines == FullLines()
    assert not lines
    assert clear_lines(board, lines) == 0
    assert board.grid[0, 0] == 1


def test_find_full_lines_is_idempotent() -> None:
    board = Board()
    board.grid[2, :] = 5
    board.grid[:, 6] = 5
    first = find_full_lines(board)
    assert first == find_full_lines(board)
    assert first.rows == (2,)
    assert first.cols == (6,)
    assert first.is_combo


def test_clear_crossing_row_and_column() -> None:
    board = Board()
    board.grid[4, :] = 1
    board.grid[:, 1] = 2
    board.grid[7, 7] = 3
    lines = find_full_lines(board)
    cells = cells_of(lines, board.size)
    assert len(cells) == 15
    assert len(set(cells)) == 15
    assert clear_lines(board, lines) == 15
    assert board.grid[4, :].tolist() == [0] * 8
    assert board.grid[:, 1].tolist() == [0] * 8
    assert board.grid[7, 7] == 3


def test_line_scores() -> None:
    rules = ScoringRules()
    assert rules.score_for_lines(0, 0) == 0
    assert rules.score_for_lines(1, 0) == 150
    assert rules.score_for_lines(0, 1) == 150
    assert rules.score_for_lines(1, 1) == 600
    assert rules.score_for_lines(2, 1) == 900
    assert rules.placement_score == 10
