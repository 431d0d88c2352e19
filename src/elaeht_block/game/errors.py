from __future__ import annotations

from enum import Enum


class MoveRejection(str, Enum):
    NOT_STARTED = "not_started"
    GAME_OVER = "game_over"
    UNKNOWN_PIECE = "unknown_piece"
    OUT_OF_BOUNDS = "out_of_bounds"
    OCCUPIED = "occupied"


class EngineError(Exception):
    """Base class for errors raised by the game engine."""


class InvalidMove(EngineError):
    """A placement was rejected; board, score and pieces are unchanged."""

    def __init__(self, reason: MoveRejection, message: str = "") -> None:
        self.reason = reason
        super().__init__(message or reason.value)


class SessionStateError(EngineError):
    """A command was issued in a session state that does not accept it."""
