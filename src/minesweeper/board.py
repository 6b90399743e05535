"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing,
flagging and game state management.
"""
import logging
import random
import threading
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellView
from .errors import IndexOutOfBounds, InvalidConfiguration
from .results import FlagResult, RejectReason, RevealResult, RevealStatus

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        size: Number of rows and of columns.
        num_mines: Total mines to place.
    """

    size: int = 12
    num_mines: int = 8

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise InvalidConfiguration("Board size must be positive")
        if self.num_mines < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        if self.num_mines > self.total_cells:
            raise InvalidConfiguration(
                f"Too many mines (max {self.total_cells})"
            )

    @property
    def total_cells(self) -> int:
        return self.size * self.size

    @property
    def safe_cells(self) -> int:
        return self.total_cells - self.num_mines


DEFAULT_CONFIG = BoardConfig()


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. Every public method runs under the board's
    own lock, so a flood reveal is never observed half done.

    Mines are placed when the board is built: randomly from ``rng``, or
    from ``mine_positions`` when a fixed layout is given.
    """

    config: BoardConfig = field(default_factory=lambda: DEFAULT_CONFIG)
    rng: random.Random = field(
        default_factory=random.Random, repr=False, compare=False
    )
    mine_positions: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)
    _cells_revealed: int = field(default=0, init=False)
    _lock: threading.RLock = field(
        default_factory=threading.RLock, init=False, repr=False, compare=False
    )

    def __post_init__(
        self, mine_positions: Optional[Iterable[Position]]
    ) -> None:
        """Build the grid and lay the mines."""
        self._init_grid()
        if mine_positions is None:
            self._place_mines()
        else:
            self._set_mines(mine_positions)
        logger.debug(
            "New %dx%d board with %d mines",
            self.config.size, self.config.size, self.config.num_mines,
        )

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def initialize(
        cls,
        size: int = DEFAULT_CONFIG.size,
        num_mines: int = DEFAULT_CONFIG.num_mines,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Start a new game with randomly placed mines.

        Args:
            size: Rows and columns of the grid.
            num_mines: Mines to place.
            seed: Seed for a private random source. Ignored if rng is given.
            rng: Random source to draw the layout from.

        Returns:
            A fresh board in the PLAYING state.

        Raises:
            InvalidConfiguration: If size or num_mines is out of range.
        """
        config = BoardConfig(size, num_mines)
        if rng is None:
            rng = random.Random(seed)
        return cls(config, rng)

    @classmethod
    def from_layout(
        cls, size: int, mine_positions: Iterable[Position]
    ) -> "Board":
        """
        Start a new game with mines at fixed positions.

        Raises:
            InvalidConfiguration: If a position is malformed, repeats or
                is off the board.
        """
        positions = list(mine_positions)
        return cls(BoardConfig(size, len(positions)), mine_positions=positions)

    def restart(self) -> "Board":
        """Return a new random game with the same configuration."""
        return type(self)(self.config, self.rng)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.size)]
            for _ in range(self.config.size)
        ]

    def _place_mines(self) -> None:
        """Place mines uniformly at random, without replacement."""
        size = self.config.size
        for index in self.rng.sample(range(size * size), self.config.num_mines):
            row, col = divmod(index, size)
            self._grid[row][col].is_mine = True

    def _set_mines(self, positions: Iterable[Position]) -> None:
        """
        Place mines at the given positions.

        The layout must hold exactly ``config.num_mines`` distinct
        in-bounds (row, col) pairs.
        """
        layout = set()
        for position in positions:
            position = tuple(position)
            if len(position) != 2:
                raise InvalidConfiguration(
                    f"Mine position {position!r} is not a (row, col) pair"
                )
            row, col = position
            if not self._is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
            if position in layout:
                raise InvalidConfiguration("Mine positions must be unique")
            layout.add(position)
        if len(layout) != self.config.num_mines:
            raise InvalidConfiguration(
                f"Layout has {len(layout)} mines, "
                f"configuration expects {self.config.num_mines}"
            )
        for row, col in layout:
            self._grid[row][col].is_mine = True

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.size and 0 <= col < self.config.size

    def _cell_at(self, row: int, col: int) -> Cell:
        """Get the cell at a position, rejecting coordinates off the board."""
        if not self._is_valid_position(row, col):
            raise IndexOutOfBounds(row, col, self.config.size)
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealResult:
        """
        Reveal a cell at the given position.

        If the cell is empty (0 adjacent mines), its neighbours are opened
        too, spreading across the whole empty region. If the cell is a
        mine, the game is lost and every mine is shown.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            REVEALED or WON with the cell's adjacent mine count, LOST,
            or REJECTED with the reason when the move is not allowed.

        Raises:
            IndexOutOfBounds: If the position is off the board.
        """
        with self._lock:
            cell = self._cell_at(row, col)
            if self._game_state != GameState.PLAYING:
                return RevealResult.rejected(RejectReason.GAME_OVER)
            if cell.is_flagged:
                return RevealResult.rejected(RejectReason.FLAGGED)
            if cell.is_revealed:
                return RevealResult.rejected(RejectReason.ALREADY_REVEALED)

            if cell.is_mine:
                self._handle_mine(row, col)
                return RevealResult(RevealStatus.LOST)

            adjacent = self._flood_reveal(row, col)
            if self._check_win_condition():
                return RevealResult(RevealStatus.WON, adjacent)
            return RevealResult(RevealStatus.REVEALED, adjacent)

    def _handle_mine(self, row: int, col: int) -> None:
        """Lose the game and open every mine on the board."""
        for grid_row in self._grid:
            for cell in grid_row:
                if cell.is_mine:
                    cell.open()
        self._game_state = GameState.LOST
        logger.debug("Mine hit at (%d, %d), game lost", row, col)

    def _reveal_safe_cell(self, row: int, col: int) -> int:
        """Open a mine-free cell and return its adjacent mine count."""
        self._grid[row][col].open()
        self._cells_revealed += 1
        return self._count_adjacent_mines(row, col)

    def _flood_reveal(self, row: int, col: int) -> int:
        """
        Open a safe cell, then every cell reachable through empty cells.

        Uses a work list instead of recursion. A cell is pushed only at
        the moment it is opened, so each cell is visited at most once.

        Returns:
            Adjacent mine count of the starting cell.
        """
        adjacent = self._reveal_safe_cell(row, col)
        if adjacent != 0:
            return adjacent

        pending = [(row, col)]
        while pending:
            current_row, current_col = pending.pop()
            for neighbor_row, neighbor_col in self._get_neighbors(
                current_row, current_col
            ):
                # hidden excludes both revealed and flagged
                if not self._grid[neighbor_row][neighbor_col].is_hidden:
                    continue
                if self._reveal_safe_cell(neighbor_row, neighbor_col) == 0:
                    pending.append((neighbor_row, neighbor_col))
        return adjacent

    def _check_win_condition(self) -> bool:
        """Move to WON once all non-mine cells are revealed."""
        if self._cells_revealed == self.config.safe_cells:
            self._game_state = GameState.WON
            logger.debug("All %d safe cells revealed, game won",
                         self._cells_revealed)
            return True
        return False

    def toggle_flag(self, row: int, col: int) -> FlagResult:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            The new flag state, or a rejection if the game is over or
            the cell is already revealed.

        Raises:
            IndexOutOfBounds: If the position is off the board.
        """
        with self._lock:
            cell = self._cell_at(row, col)
            if self._game_state != GameState.PLAYING:
                return FlagResult.rejected(RejectReason.GAME_OVER)
            if cell.is_revealed:
                return FlagResult.rejected(RejectReason.ALREADY_REVEALED)
            return FlagResult(is_flagged=cell.toggle_flag())

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def revealed_count(self) -> int:
        """Number of safe cells revealed so far."""
        return self._cells_revealed

    @property
    def flag_count(self) -> int:
        """Number of cells currently flagged."""
        with self._lock:
            return sum(cell.is_flagged for row in self._grid for cell in row)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed. Negative when over-flagged."""
        return self.config.num_mines - self.flag_count

    def query_cell(self, row: int, col: int) -> CellView:
        """
        Get what the player may see of a cell.

        Mines show up only once revealed or after the game is lost.

        Raises:
            IndexOutOfBounds: If the position is off the board.
        """
        with self._lock:
            cell = self._cell_at(row, col)
            return cell.view(
                self._count_adjacent_mines(row, col),
                game_lost=self._game_state == GameState.LOST,
            )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = visible mine
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        with self._lock:
            for row in range(size):
                for col in range(size):
                    obs[row, col] = self.query_cell(row, col).to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells that can be revealed.

        Returns:
            (row, col) positions that are hidden and not flagged. Empty
            once the game is over.
        """
        with self._lock:
            if self._game_state != GameState.PLAYING:
                return []
            actions = []
            for row in range(self.config.size):
                for col in range(self.config.size):
                    if self._grid[row][col].is_hidden:
                        actions.append((row, col))
            return actions
