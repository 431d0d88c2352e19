"""Game engine for Elaeht Block.

Exports the core engine and supporting classes:
- Board: 8x8 grid, placement legality and anchors
- Piece, PieceCatalog: random piece generation with rotation/mirroring
- FullLines, find_full_lines, clear_lines: row and column clearing
- ScoringRules: line, combo and placement points
- any_placement_exists: game-over detection
- GameEngine: session state machine
"""

from .errors import EngineError, InvalidMove, MoveRejection, SessionStateError
from .grid import BOARD_SIZE, Board
from .pieces import (
    PIECE_CATALOG,
    Piece,
    PieceCatalog,
    PieceColor,
    PieceTemplate,
    make_shape,
    mirror,
    rotate_cw,
)
from .lines import FullLines, cells_of, clear_lines, find_full_lines
from .rules import ScoringRules
from .moves import any_placement_exists, legal_anchors, valid_placements
from .core import GameConfig, GameEngine, GameStatus, MoveResult, Preview

__all__ = [
    "BOARD_SIZE",
    "Board",
    "EngineError",
    "InvalidMove",
    "MoveRejection",
    "SessionStateError",
    "PIECE_CATALOG",
    "Piece",
    "PieceCatalog",
    "PieceColor",
    "PieceTemplate",
    "make_shape",
    "mirror",
    "rotate_cw",
    "FullLines",
    "cells_of",
    "clear_lines",
    "find_full_lines",
    "ScoringRules",
    "any_placement_exists",
    "legal_anchors",
    "valid_placements",
    "GameConfig",
    "GameEngine",
    "GameStatus",
    "MoveResult",
    "Preview",
]
