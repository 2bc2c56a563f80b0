"""
Minesweeper rules engine.

Provides the board engine, difficulty presets, a session controller and
a Gymnasium environment around the board.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, BoardStatus, GameState
from .difficulty import (
    Difficulty,
    DIFFICULTIES,
    DEFAULT_DIFFICULTY,
    EASY,
    MEDIUM,
    HARD,
    get_difficulty,
)
from .session import GameSession
from .environment import MinesweeperEnv, make_vec_env

__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "BoardStatus",
    "GameState",
    "Difficulty",
    "DIFFICULTIES",
    "DEFAULT_DIFFICULTY",
    "EASY",
    "MEDIUM",
    "HARD",
    "get_difficulty",
    "GameSession",
    "MinesweeperEnv",
    "make_vec_env",
]
