"""
Minesweeper board engine.

Provides board generation, flood-fill reveal, flagging and win/loss
tracking, plus the drivers front ends use to play it.
"""
from .cell import Cell, CellState
from .board import (
    Board,
    BoardConfig,
    RevealOutcome,
    generate,
    DEFAULT,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    PRESETS,
)
from .errors import SweeperError, InvalidConfiguration, IllegalMove
from .session import GameSession, CellView
from .clock import Ticker
from .render import render_board, render_status
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "RevealOutcome",
    "generate",
    "DEFAULT",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "SweeperError",
    "InvalidConfiguration",
    "IllegalMove",
    "GameSession",
    "CellView",
    "Ticker",
    "render_board",
    "render_status",
    "MinesweeperEnv",
]
