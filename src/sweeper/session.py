"""
Game session module for Minesweeper.

Wraps a board with the game-over/won flags and elapsed time, and is the
interface front ends drive: new game, click, flag and tick.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .board import Board, BoardConfig, RevealOutcome, DEFAULT
from .cell import CellState
from .errors import IllegalMove

logger = logging.getLogger(__name__)

Listener = Callable[["GameSession"], None]


# ============================================================================
# Render View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    What a renderer may show for one cell.

    ``mine`` and ``neighbor_count`` are only filled in once the cell is
    revealed; hidden cells report False and None.
    """

    row: int
    col: int
    revealed: bool
    flagged: bool
    mine: bool
    neighbor_count: Optional[int]


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One play-through at a time, from new game to win or loss.

    A session starts idle (no board, reported as over) until
    :meth:`new_game` is called. Moves on an idle or finished session are
    ignored, as are moves the board rejects.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        """
        Initialize an idle session.

        Args:
            rng: Random source shared by every board this session
                generates.
        """
        self.rng = rng or random.Random()
        self.board: Optional[Board] = None
        self.game_over = True
        self.game_won = False
        self.elapsed_time = 0
        self._listeners: List[Listener] = []

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(
        self,
        rows: int = DEFAULT.rows,
        cols: int = DEFAULT.cols,
        mine_count: int = DEFAULT.mine_count,
        config: Optional[BoardConfig] = None,
    ) -> Board:
        """
        Replace any current game with a freshly generated board.

        Raises:
            InvalidConfiguration: If the dimensions or mine count are
                invalid. The previous game is left untouched.
        """
        config = config or BoardConfig(rows, cols, mine_count)
        board = Board.generate(config, self.rng)

        self.board = board
        self.game_over = False
        self.game_won = False
        self.elapsed_time = 0
        logger.info(
            "New game: %dx%d with %d mines",
            config.rows, config.cols, config.mine_count,
        )
        self._notify()
        return board

    def load(self, board: Board) -> None:
        """Start a game on a prebuilt board."""
        self.board = board
        self.game_over = False
        self.game_won = False
        self.elapsed_time = 0
        self._notify()

    @property
    def is_active(self) -> bool:
        """A game is loaded and has not ended."""
        return self.board is not None and not self.game_over

    # ========================================================================
    # Player Actions
    # ========================================================================

    def click(self, row: int, col: int) -> Optional[RevealOutcome]:
        """
        Reveal a cell if the game is active.

        Returns:
            The reveal outcome, or None if the click was ignored.
        """
        if not self.is_active:
            logger.debug("Ignoring click at (%d, %d): game not active", row, col)
            return None
        try:
            outcome = self.board.reveal(row, col)
        except IllegalMove as error:
            logger.debug("Ignoring click: %s", error)
            return None

        if outcome is RevealOutcome.LOSS:
            self._finish(won=False)
        elif outcome is RevealOutcome.WIN:
            self._finish(won=True)
        self._notify()
        return outcome

    def flag(self, row: int, col: int) -> bool:
        """
        Toggle a flag if the game is active.

        Returns:
            True if the flag was toggled, False if the move was ignored.
        """
        if not self.is_active:
            logger.debug("Ignoring flag at (%d, %d): game not active", row, col)
            return False
        try:
            self.board.toggle_flag(row, col)
        except IllegalMove as error:
            logger.debug("Ignoring flag: %s", error)
            return False
        self._notify()
        return True

    def tick(self) -> int:
        """Advance elapsed time by one unit while the game is active."""
        if self.is_active:
            self.elapsed_time += 1
            self._notify()
        return self.elapsed_time

    def _finish(self, won: bool) -> None:
        self.game_over = True
        self.game_won = won
        logger.info(
            "Game %s after %d ticks", "won" if won else "lost", self.elapsed_time
        )

    # ========================================================================
    # Change Notification
    # ========================================================================

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Call ``listener(session)`` after every state change.

        Returns:
            A function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    # ========================================================================
    # Observable State
    # ========================================================================

    @property
    def flags_placed(self) -> int:
        if self.board is None:
            return 0
        return self.board.count(CellState.FLAGGED)

    @property
    def mines_remaining(self) -> int:
        """Mine count minus flags placed; negative when over-flagged."""
        if self.board is None:
            return 0
        return self.board.mine_count - self.flags_placed

    def cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Renderable state of one cell, or None if off the board."""
        if self.board is None:
            return None
        cell = self.board.get_cell(row, col)
        if cell is None:
            return None
        revealed = cell.is_revealed
        return CellView(
            row=cell.row,
            col=cell.col,
            revealed=revealed,
            flagged=cell.is_flagged,
            mine=cell.is_mine if revealed else False,
            neighbor_count=cell.neighbor_count if revealed else None,
        )

    def view(self) -> List[List[CellView]]:
        """Renderable state of the whole board, row by row."""
        if self.board is None:
            return []
        return [
            [self.cell_view(row, col) for col in range(self.board.cols)]
            for row in range(self.board.rows)
        ]

    def get_observation(self) -> np.ndarray:
        """Numeric board state; see :meth:`Board.get_observation`."""
        if self.board is None:
            return np.zeros((0, 0), dtype=np.int8)
        return self.board.get_observation()
