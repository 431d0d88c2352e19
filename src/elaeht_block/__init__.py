"""Elaeht Block: an 8x8 block placement puzzle.

Place three pieces at a time, clear full rows and columns for points; the
game ends when none of the held pieces fits anywhere.
"""

from .game import GameConfig, GameEngine, InvalidMove, MoveResult

__all__ = ["GameConfig", "GameEngine", "InvalidMove", "MoveResult"]
