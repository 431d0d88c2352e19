from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

import numpy as np

from .errors import InvalidMove, MoveRejection, SessionStateError
from .grid import BOARD_SIZE, Board, Coordinate
from .lines import cells_of, clear_lines, find_full_lines
from .moves import any_placement_exists, valid_placements
from .pieces import Piece, PieceCatalog
from .rules import ScoringRules


logger = logging.getLogger(__name__)


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    board_size: int = BOARD_SIZE
    pieces_per_set: int = 3
    random_seed: Optional[int] = None
    allow_rotation: bool = True
    allow_mirror: bool = False


@dataclass(frozen=True)
class MoveResult:
    score_delta: int
    lines_cleared: bool
    rows: Tuple[int, ...]
    cols: Tuple[int, ...]
    cleared_cells: Tuple[Coordinate, ...]
    combo: bool
    game_over: bool
    score: int


@dataclass(frozen=True)
class Preview:
    row: int
    col: int
    legal: bool


class GameEngine:
    """Single-session state machine for the 8x8 block game.

    ``NOT_STARTED -> IN_PROGRESS -> GAME_OVER``; ``reset`` starts a fresh
    session from either of the latter two states. ``preview`` and
    ``is_legal`` are read-only queries for drag feedback, ``place`` is the
    only command that mutates a session.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rules: Optional[ScoringRules] = None,
        catalog: Optional[PieceCatalog] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.catalog = catalog or PieceCatalog(
            rng=self.rng,
            allow_rotation=self.config.allow_rotation,
            allow_mirror=self.config.allow_mirror,
        )
        self.board = Board(self.config.board_size)
        self.pieces: List[Piece] = []
        self.score = 0
        self.status = GameStatus.NOT_STARTED
        self.total_lines_cleared = 0
        self.total_pieces_placed = 0

    @property
    def game_over(self) -> bool:
        return self.status is GameStatus.GAME_OVER

    def start(self) -> None:
        if self.status is not GameStatus.NOT_STARTED:
            raise SessionStateError(f"cannot start a game while {self.status.value}")
        self._new_session()

    def reset(self) -> None:
        if self.status is GameStatus.NOT_STARTED:
            raise SessionStateError("no session to reset")
        self._new_session()

    def quit(self) -> None:
        """Drop the current session and return to the menu state."""
        self.board.reset()
        self.pieces = []
        self.score = 0
        self.status = GameStatus.NOT_STARTED

    def _new_session(self) -> None:
        self.board.reset()
        self.score = 0
        self.total_lines_cleared = 0
        self.total_pieces_placed = 0
        self.pieces = self.catalog.generate_batch(self.config.pieces_per_set)
        self.status = GameStatus.IN_PROGRESS
        logger.info("new session with pieces %s", [p.id for p in self.pieces])

    def piece(self, piece_id: int) -> Optional[Piece]:
        for p in self.pieces:
            if p.id == piece_id:
                return p
        return None

    def is_legal(self, piece_id: int, row: int, col: int) -> bool:
        piece = self.piece(piece_id)
        if piece is None or self.status is not GameStatus.IN_PROGRESS:
            return False
        return self.board.is_legal_placement(piece.shape, row, col)

    def preview(self, piece_id: int, drop_row: int, drop_col: int) -> Optional[Preview]:
        """Anchor and legality for dropping ``piece_id`` on cell (drop_row, drop_col)."""
        piece = self.piece(piece_id)
        if piece is None:
            return None
        row, col = self.board.anchor_for_drop(piece.shape, drop_row, drop_col)
        return Preview(row, col, self.is_legal(piece_id, row, col))

    def _reject(self, reason: MoveRejection, message: str) -> InvalidMove:
        logger.debug("rejected move: %s", message)
        return InvalidMove(reason, message)

    def place(self, piece_id: int, row: int, col: int) -> MoveResult:
        if self.status is GameStatus.NOT_STARTED:
            raise self._reject(MoveRejection.NOT_STARTED, "no game in progress")
        if self.status is GameStatus.GAME_OVER:
            raise self._reject(MoveRejection.GAME_OVER, "game is over")
        piece = self.piece(piece_id)
        if piece is None:
            raise self._reject(MoveRejection.UNKNOWN_PIECE, f"piece {piece_id} is not in the active set")
        if not self.board.fits_inside(piece.shape, row, col):
            raise self._reject(MoveRejection.OUT_OF_BOUNDS, f"piece {piece_id} does not fit at ({row}, {col})")
        if not self.board.is_legal_placement(piece.shape, row, col):
            raise self._reject(MoveRejection.OCCUPIED, f"piece {piece_id} overlaps filled cells at ({row}, {col})")

        self.board.place(piece.shape, row, col, int(piece.color))

        # Score and clear-set come from the full board before it is cleared.
        lines = find_full_lines(self.board)
        gained = 0
        cleared_cells: Tuple[Coordinate, ...] = ()
        if lines:
            gained += self.rules.score_for_lines(len(lines.rows), len(lines.cols))
            cleared_cells = tuple(cells_of(lines, self.board.size))
            clear_lines(self.board, lines)
            self.total_lines_cleared += lines.total
        gained += self.rules.placement_score
        self.score += gained
        self.total_pieces_placed += 1

        self.pieces = [p for p in self.pieces if p.id != piece_id]
        if not self.pieces:
            self.pieces = self.catalog.generate_batch(self.config.pieces_per_set)
            logger.debug("refilled pieces %s", [p.id for p in self.pieces])

        if not any_placement_exists(self.board, self.pieces):
            self.status = GameStatus.GAME_OVER
            logger.info("game over with score %d\n%s", self.score, self.board)

        logger.debug(
            "placed piece %d at (%d, %d): +%d (rows=%s cols=%s)",
            piece_id, row, col, gained, lines.rows, lines.cols,
        )
        return MoveResult(
            score_delta=gained,
            lines_cleared=bool(lines),
            rows=lines.rows,
            cols=lines.cols,
            cleared_cells=cleared_cells,
            combo=lines.is_combo,
            game_over=self.game_over,
            score=self.score,
        )

    def get_valid_actions(self) -> List[Tuple[int, int, int]]:
        """List of (slot, row, col) valid actions for the ordered active set."""
        if self.status is not GameStatus.IN_PROGRESS:
            return []
        return valid_placements(self.board, self.pieces)

    def snapshot(self) -> dict:
        return {
            "grid": self.board.clone_state(),
            "pieces": [
                {"id": p.id, "shape": np.array(p.shape), "color": int(p.color)}
                for p in self.pieces
            ],
            "score": self.score,
            "status": self.status.value,
            "game_over": self.game_over,
        }

    def get_game_stats(self) -> dict:
        return {
            "final_score": self.score,
            "pieces_placed": self.total_pieces_placed,
            "lines_cleared": self.total_lines_cleared,
            "final_fill_ratio": self.board.filled_ratio(),
            "avg_score_per_piece": self.score / max(1, self.total_pieces_placed),
        }
