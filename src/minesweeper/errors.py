"""
Exceptions raised by the Minesweeper engine.

Only caller errors are exceptions. Moves refused by the game rules are
reported through result values instead (see results module).
"""


class MinesweeperError(Exception):
    """Base class for engine errors."""


class InvalidConfiguration(MinesweeperError, ValueError):
    """Board size, mine count, or mine layout is not usable."""


class IndexOutOfBounds(MinesweeperError, IndexError):
    """Coordinates fall outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside a {size}x{size} board"
        )
        self.row = row
        self.col = col
        self.size = size
