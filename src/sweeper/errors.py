"""
Exceptions raised by the Minesweeper engine.
"""


class SweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfiguration(SweeperError, ValueError):
    """Board dimensions or mine count cannot produce a playable board."""


class IllegalMove(SweeperError):
    """
    A reveal or flag that the current board state does not allow.

    Raised for out-of-bounds positions, revealing a flagged cell,
    flagging a revealed cell, or moving after the game has ended.
    """

    def __init__(self, row: int, col: int, reason: str) -> None:
        super().__init__(f"Illegal move at ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason
