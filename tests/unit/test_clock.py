"""
Unit tests for the Ticker elapsed-time driver.
"""
import pytest
from sweeper import Board, GameSession, Ticker


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ticker(two_mine_session: GameSession, clock: FakeClock) -> Ticker:
    return Ticker(two_mine_session, interval=1.0, clock=clock)


class TestTicker:
    """Test conversion of wall-clock time into ticks."""

    def test_no_ticks_before_interval(
        self, ticker: Ticker, clock: FakeClock
    ) -> None:
        """Less than one interval delivers nothing."""
        clock.now += 0.9
        assert ticker.poll() == 0
        assert ticker.session.elapsed_time == 0

    def test_whole_intervals_become_ticks(
        self, ticker: Ticker, clock: FakeClock
    ) -> None:
        """Every whole interval since the last poll is delivered."""
        clock.now += 3.5
        assert ticker.poll() == 3
        clock.now += 0.5
        assert ticker.poll() == 1
        assert ticker.session.elapsed_time == 4

    def test_time_after_game_over_is_discarded(
        self, ticker: Ticker, clock: FakeClock
    ) -> None:
        """A finished game does not accumulate time."""
        clock.now += 2.0
        ticker.poll()
        ticker.session.click(0, 0)
        clock.now += 10.0
        assert ticker.poll() == 0
        assert ticker.session.elapsed_time == 2

    def test_restart_drops_pending_time(
        self, ticker: Ticker, clock: FakeClock
    ) -> None:
        """Restarting after a new game starts the count from zero."""
        clock.now += 5.0
        ticker.session.load(Board.from_mines(3, 3, [(1, 1)]))
        ticker.restart()
        clock.now += 1.0
        assert ticker.poll() == 1
        assert ticker.session.elapsed_time == 1

    def test_interval_must_be_positive(
        self, two_mine_session: GameSession
    ) -> None:
        """A zero interval would never finish a poll."""
        with pytest.raises(ValueError):
            Ticker(two_mine_session, interval=0)
