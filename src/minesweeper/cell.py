"""
Cell module for Minesweeper game.

A cell holds its mine and its visual state. The neighbour count is not
stored; the board derives it and hands it in when building a view.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Visual state of a cell. One field, so revealed and flagged exclude."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Read-only projection of a cell for rendering.

    Attributes:
        is_revealed: Whether the cell has been opened.
        is_flagged: Whether the player has flagged the cell.
        adjacent_mines: Mines among the neighbours (0-8). None unless the
            cell is revealed and safe.
        has_mine_visible: True only for a mine the player is allowed to
            see (revealed, or the game was lost).
    """

    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: Optional[int] = None
    has_mine_visible: bool = False

    def to_observation(self) -> int:
        """
        Encode the view as a single observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Visible mine
        """
        if self.has_mine_visible:
            return 9
        if self.is_flagged:
            return -2
        if not self.is_revealed:
            return -1
        return self.adjacent_mines


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    One square of the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell holds a mine. Fixed once placed.
        state: Hidden, revealed or flagged.
    """

    is_mine: bool = False
    state: CellState = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        return self.state is CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state is CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state is CellState.FLAGGED

    def open(self) -> None:
        """Mark the cell revealed, replacing a flag if there was one."""
        self.state = CellState.REVEALED

    def toggle_flag(self) -> bool:
        """
        Flip the flag on an unopened cell.

        Returns:
            The flag state after the call. A revealed cell is left alone
            and reports False.
        """
        if self.is_revealed:
            return False
        if self.is_flagged:
            self.state = CellState.HIDDEN
        else:
            self.state = CellState.FLAGGED
        return self.is_flagged

    def view(self, adjacent_mines: int, game_lost: bool = False) -> CellView:
        """
        Project the cell for the player.

        Args:
            adjacent_mines: Neighbour mine count computed by the board.
            game_lost: Whether the game ended on a mine, which shows
                every mine.
        """
        safe_and_open = self.is_revealed and not self.is_mine
        return CellView(
            is_revealed=self.is_revealed,
            is_flagged=self.is_flagged,
            adjacent_mines=adjacent_mines if safe_and_open else None,
            has_mine_visible=self.is_mine and (self.is_revealed or game_lost),
        )
