"""
Board module for Minesweeper game.

Implements the game board with mine placement, neighbor counting,
flood-fill revealing and win evaluation.
"""
import logging
import random
from collections import deque
from dataclasses import InitVar, dataclass, field
from enum import Enum, auto
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState
from .errors import IllegalMove, InvalidConfiguration

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """Result of revealing a cell."""

    CONTINUE = auto()
    LOSS = auto()
    WIN = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mine_count: Total mines to place.
    """

    rows: int = 10
    cols: int = 10
    mine_count: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.mine_count < 0:
            raise InvalidConfiguration("Number of mines cannot be negative")
        max_mines = self.cell_count - 1
        if self.mine_count > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cell_count(self) -> int:
        return self.cell_count - self.mine_count


# Preset sizes
DEFAULT = BoardConfig(10, 10, 10)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS: Dict[str, BoardConfig] = {
    "default": DEFAULT,
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells. Mines and neighbor counts are fixed when the
    board is built; afterwards only reveal and flag state changes.

    Attributes:
        config: Board dimensions and mine count.
        rng: Random source for mine placement; pass a seeded instance
            for a repeatable layout.
        mines: Explicit mine positions. When given, ``config.mine_count``
            must match and no random placement happens.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(
        default=None, repr=False, compare=False
    )
    mines: InitVar[Optional[Iterable[Position]]] = None
    _grid: List[List[Cell]] = field(init=False, default_factory=list, repr=False)

    def __post_init__(self, mines: Optional[Iterable[Position]]) -> None:
        """Build the grid, lay the mines and count neighbors."""
        self._init_grid()
        if mines is None:
            self._place_random_mines(self.rng or random.Random())
        else:
            self._place_mines(mines)
        self._calculate_neighbor_counts()

    # ========================================================================
    # Construction (High-level)
    # ========================================================================

    @classmethod
    def generate(
        cls,
        config: Optional[BoardConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """
        Build a board with mines placed uniformly at random.

        Args:
            config: Board dimensions and mine count (default 10x10, 10).
            rng: Random source for mine placement.

        Returns:
            Fully initialized board with nothing revealed or flagged.
        """
        return cls(config or BoardConfig(), rng=rng)

    @classmethod
    def from_mines(
        cls, rows: int, cols: int, mines: Iterable[Position]
    ) -> "Board":
        """Build a board with mines at the given positions."""
        positions = list(mines)
        return cls(BoardConfig(rows, cols, len(positions)), mines=positions)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell(row, col) for col in range(self.config.cols)]
            for row in range(self.config.rows)
        ]

    def _place_mines(self, mines: Iterable[Position]) -> None:
        """
        Lay mines at explicit positions.

        Raises:
            InvalidConfiguration: If a position repeats, falls off the
                grid, or the count disagrees with the configuration.
        """
        positions = [tuple(position) for position in mines]
        if len(set(positions)) != len(positions):
            raise InvalidConfiguration("Duplicate mine positions")
        if len(positions) != self.config.mine_count:
            raise InvalidConfiguration(
                f"Expected {self.config.mine_count} mines, got {len(positions)}"
            )
        for row, col in positions:
            if not self._is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )
            self._grid[row][col].is_mine = True

    def _place_random_mines(self, rng: random.Random) -> None:
        """Place mines by rejection sampling over random positions."""
        placed = 0
        attempts = 0
        while placed < self.config.mine_count:
            attempts += 1
            row = rng.randrange(self.config.rows)
            col = rng.randrange(self.config.cols)
            cell = self._grid[row][col]
            if cell.is_mine:
                continue
            cell.is_mine = True
            placed += 1
        logger.debug(
            "Placed %d mines on %dx%d board in %d attempts",
            placed, self.config.rows, self.config.cols, attempts,
        )

    def _calculate_neighbor_counts(self) -> None:
        """Calculate neighbor mine counts for all cells."""
        for cell in self.cells():
            cell.neighbor_count = self._count_neighbor_mines(cell.row, cell.col)

    def _count_neighbor_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors; corner cells
            have 3, edge cells 5, interior cells 8.
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
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    def _cell_at(self, row: int, col: int) -> Cell:
        if not self._is_valid_position(row, col):
            raise IllegalMove(row, col, "position is off the board")
        return self._grid[row][col]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> RevealOutcome:
        """
        Reveal a cell at the given position.

        A mine loses the game and exposes every mine on the board. A cell
        with no neighboring mines opens its whole blank region plus the
        numbered cells bordering it.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            LOSS for a mine, WIN once every safe cell is revealed,
            CONTINUE otherwise (including an already revealed target).

        Raises:
            IllegalMove: If the position is off the board or flagged.
        """
        cell = self._cell_at(row, col)
        if cell.is_flagged:
            raise IllegalMove(row, col, "cell is flagged")
        if not cell.reveal():
            return RevealOutcome.CONTINUE

        if cell.is_mine:
            self._reveal_all_mines()
            return RevealOutcome.LOSS

        if cell.neighbor_count == 0:
            self._flood_fill(cell)

        if self.check_win():
            return RevealOutcome.WIN
        return RevealOutcome.CONTINUE

    def _flood_fill(self, origin: Cell) -> None:
        """
        Reveal the blank region around an already revealed blank cell.

        Cells are marked revealed as they are queued, so each one is
        visited at most once. Flags on safe cells in the way are cleared.
        """
        queue = deque([origin])
        while queue:
            cell = queue.popleft()
            for neighbor_row, neighbor_col in self.neighbors(cell.row, cell.col):
                neighbor = self._grid[neighbor_row][neighbor_col]
                if neighbor.is_mine or neighbor.is_revealed:
                    continue
                neighbor.force_reveal()
                if neighbor.neighbor_count == 0:
                    queue.append(neighbor)

    def _reveal_all_mines(self) -> None:
        """Expose every mine, flagged or not."""
        for cell in self.cells():
            if cell.is_mine:
                cell.force_reveal()

    def check_win(self) -> bool:
        """Check if all non-mine cells are revealed."""
        return all(cell.is_revealed for cell in self.cells() if not cell.is_mine)

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the cell is now flagged, False if the flag was removed.

        Raises:
            IllegalMove: If the position is off the board or revealed.
        """
        cell = self._cell_at(row, col)
        if not cell.toggle_flag():
            raise IllegalMove(row, col, "cell is already revealed")
        return cell.is_flagged

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def count(self, state: CellState) -> int:
        """Number of cells currently in the given state."""
        return sum(1 for cell in self.cells() if cell.state == state)

    def mine_positions(self) -> List[Position]:
        return [cell.position for cell in self.cells() if cell.is_mine]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbor count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of valid cells to reveal.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        return [cell.position for cell in self.cells() if cell.is_hidden]


def generate(
    rows: int,
    cols: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """Build a random board from bare dimensions."""
    return Board.generate(BoardConfig(rows, cols, mine_count), rng)
