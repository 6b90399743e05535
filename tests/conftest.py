"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 12x12 board with 8 mines."""
    return Board.initialize(seed=1234)


@pytest.fixture
def small_board() -> Board:
    """3x3 board with a single mine in the centre."""
    return Board.from_layout(3, [(1, 1)])


@pytest.fixture
def corner_board() -> Board:
    """5x5 board with a single mine in the top-left corner."""
    return Board.from_layout(5, [(0, 0)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_layout(5, [])


@pytest.fixture
def walled_board() -> Board:
    """
    5x5 board with a wall of mines down column 2.

    Left and right halves are separate empty regions.
    """
    return Board.from_layout(5, [(row, 2) for row in range(5)])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)
