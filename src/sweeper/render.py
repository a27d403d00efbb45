"""
Plain-text rendering of a game session.
"""
from typing import List

from .session import CellView, GameSession

HIDDEN = "."
FLAG = "F"
MINE = "*"
BLANK = " "


def render_cell(view: CellView) -> str:
    """Single character for one cell."""
    if view.revealed:
        if view.mine:
            return MINE
        if view.neighbor_count == 0:
            return BLANK
        return str(view.neighbor_count)
    if view.flagged:
        return FLAG
    return HIDDEN


def render_board(session: GameSession, headers: bool = False) -> str:
    """
    Render the board as lines of space-separated cell characters.

    Args:
        session: Session whose board to draw.
        headers: Prefix rows and columns with their indices, for front
            ends where the player types coordinates.
    """
    rows = session.view()
    if not rows:
        return ""

    width = len(str(len(rows) - 1))
    lines: List[str] = []
    if headers:
        col_digits = len(str(len(rows[0]) - 1))
        for digit in range(col_digits):
            labels = [str(col).rjust(col_digits)[digit] for col in range(len(rows[0]))]
            lines.append(" " * (width + 1) + " ".join(labels))

    for index, row in enumerate(rows):
        text = " ".join(render_cell(view) for view in row)
        if headers:
            text = f"{str(index).rjust(width)} {text}"
        lines.append(text)
    return "\n".join(lines)


def render_status(session: GameSession) -> str:
    """One status line: mines left, time, and the end-of-game banner."""
    status = f"Mines: {session.mines_remaining}  Time: {session.elapsed_time}s"
    if session.board is not None and session.game_over:
        status += "  You won!" if session.game_won else "  Game over!"
    return status
