"""
Pytest configuration and shared fixtures.
"""
import random

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for repeatable layouts."""
    return random.Random(1234)


@pytest.fixture
def default_board(rng: random.Random) -> Board:
    """Create a default 10x10 board with 10 mines."""
    return Board.generate(BoardConfig(), rng)


@pytest.fixture
def two_mine_board() -> Board:
    """3x3 board with mines in opposite corners."""
    return Board.from_mines(3, 3, [(0, 0), (2, 2)])


@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board with a single mine at the bottom-right corner."""
    return Board.from_mines(5, 5, [(4, 4)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board.from_mines(5, 5, [])


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session(rng: random.Random) -> GameSession:
    """Session with a default game in progress."""
    session = GameSession(rng=rng)
    session.new_game()
    return session


@pytest.fixture
def two_mine_session(two_mine_board: Board) -> GameSession:
    """Session playing the 3x3 two-mine board."""
    session = GameSession()
    session.load(two_mine_board)
    return session


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


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with neighboring mines."""
    cell = Cell(neighbor_count=3)
    cell.reveal()
    return cell
