"""
Elapsed-time driver for a game session.

The session never keeps time itself; a front end owns a ``Ticker`` and
polls it from its own loop, which turns wall-clock time into whole
``tick()`` calls.
"""
import time
from typing import Callable

from .session import GameSession


class Ticker:
    """
    Converts a monotonic clock into session ticks.

    Attributes:
        session: Session to advance.
        interval: Seconds per tick.
        clock: Time source returning seconds; ``time.monotonic`` unless
            a test supplies a fake.
    """

    def __init__(
        self,
        session: GameSession,
        interval: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self.session = session
        self.interval = interval
        self.clock = clock
        self._last = clock()

    def restart(self) -> None:
        """Start counting from now, e.g. right after a new game."""
        self._last = self.clock()

    def poll(self) -> int:
        """
        Deliver every whole tick that elapsed since the last poll.

        Returns:
            Number of ticks delivered. Time spent while the game is not
            active is discarded rather than banked.
        """
        now = self.clock()
        if not self.session.is_active:
            self._last = now
            return 0

        delivered = 0
        while now - self._last >= self.interval:
            self.session.tick()
            self._last += self.interval
            delivered += 1
        return delivered
