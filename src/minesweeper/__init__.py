"""
Minesweeper game module.

Provides the core rules: board management, cell state, and the
result values returned by player actions.
"""
from .cell import Cell, CellState, CellView
from .board import Board, BoardConfig, GameState, DEFAULT_CONFIG
from .errors import MinesweeperError, InvalidConfiguration, IndexOutOfBounds
from .results import FlagResult, RejectReason, RevealResult, RevealStatus

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "BoardConfig",
    "GameState",
    "DEFAULT_CONFIG",
    "MinesweeperError",
    "InvalidConfiguration",
    "IndexOutOfBounds",
    "FlagResult",
    "RejectReason",
    "RevealResult",
    "RevealStatus",
]
