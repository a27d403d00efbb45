"""
Unit tests for the Gymnasium environment wrapper.
"""
import pytest
import numpy as np
from sweeper import Board, BoardConfig, MinesweeperEnv


@pytest.fixture
def env() -> MinesweeperEnv:
    """Seeded 5x5 environment with 3 mines."""
    env = MinesweeperEnv(config=BoardConfig(5, 5, 3), render_mode="ansi")
    env.reset(seed=11)
    return env


def first_safe_action(env: MinesweeperEnv) -> int:
    for cell in env.session.board.cells():
        if not cell.is_mine:
            return cell.row * env.config.cols + cell.col
    raise AssertionError("board has no safe cell")


def first_mine_action(env: MinesweeperEnv) -> int:
    row, col = env.session.board.mine_positions()[0]
    return row * env.config.cols + col


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_has_one_action_per_cell(
        self, env: MinesweeperEnv
    ) -> None:
        """Discrete actions cover the whole grid."""
        assert env.action_space.n == 25

    def test_reset_observation_is_hidden(self, env: MinesweeperEnv) -> None:
        """Fresh observation is all hidden and fits the space."""
        obs, info = env.reset(seed=11)
        assert obs.shape == (5, 5)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "PLAYING"
        assert info["total_safe"] == 22

    def test_seed_reproduces_layout(self, env: MinesweeperEnv) -> None:
        """The same seed gives the same mines."""
        first = env.session.board.mine_positions()
        env.reset(seed=11)
        assert env.session.board.mine_positions() == first


class TestStep:
    """Test rewards and termination."""

    def test_safe_reveal_rewarded(self, env: MinesweeperEnv) -> None:
        """A safe reveal earns +1, or +10 if it clears the board."""
        _, reward, terminated, truncated, info = env.step(first_safe_action(env))
        assert reward in (1.0, 10.0)
        assert truncated is False
        assert terminated == (info["game_state"] == "WON")

    def test_mine_ends_episode(self, env: MinesweeperEnv) -> None:
        """Hitting a mine costs 10 and terminates."""
        obs, reward, terminated, _, info = env.step(first_mine_action(env))
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert np.count_nonzero(obs == 9) == 3

    def test_repeat_action_penalized(self, env: MinesweeperEnv) -> None:
        """Revealing a revealed cell is an invalid action."""
        env.session.load(Board.from_mines(5, 5, [(0, 0), (4, 4), (2, 2)]))
        env.step(1)
        _, reward, _, _, _ = env.step(1)
        assert reward == pytest.approx(-0.1)

    def test_winning_step(self) -> None:
        """Clearing the board earns +10 and terminates."""
        env = MinesweeperEnv(config=BoardConfig(5, 5, 1))
        env.reset(seed=0)
        env.session.load(Board.from_mines(5, 5, [(4, 4)]))
        _, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert info["revealed"] == 24


class TestActionMask:
    """Test the valid action mask."""

    def test_mask_tracks_hidden_cells(self, env: MinesweeperEnv) -> None:
        """Revealed and flagged cells drop out of the mask."""
        env.session.load(Board.from_mines(5, 5, [(0, 0), (4, 4), (2, 2)]))
        env.step(1)
        env.session.flag(0, 0)
        mask = env.get_action_mask()
        assert mask.dtype == np.int8
        assert mask[1] == 0
        assert mask[0] == 0
        assert mask.sum() == 23

    def test_mask_empty_after_game_over(self, env: MinesweeperEnv) -> None:
        """No valid actions once the episode has terminated."""
        env.step(first_mine_action(env))
        assert env.get_action_mask().sum() == 0

    def test_sampling_with_mask_picks_hidden_cell(
        self, env: MinesweeperEnv
    ) -> None:
        """Masked sampling only offers hidden cells."""
        env.action_space.seed(3)
        for _ in range(10):
            action = env.action_space.sample(mask=env.get_action_mask())
            row, col = divmod(int(action), 5)
            assert env.session.board.get_cell(row, col).is_hidden


class TestRender:
    """Test text rendering."""

    def test_ansi_render(self, env: MinesweeperEnv) -> None:
        """ANSI mode returns the board and status line."""
        text = env.render()
        lines = text.split("\n")
        assert len(lines) == 6
        assert lines[0] == ". . . . ."
        assert lines[-1].startswith("Mines: 3")


class TestConstruction:
    """Test the environment before any reset."""

    def test_step_without_reset_plays_a_game(self) -> None:
        """A fresh environment already holds a playable board."""
        env = MinesweeperEnv(config=BoardConfig(3, 3, 0))
        obs, reward, terminated, _, info = env.step(4)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"
        assert np.all(obs == 0)

    def test_mask_available_before_reset(self) -> None:
        """Every cell is a valid action on the initial board."""
        env = MinesweeperEnv(config=BoardConfig(4, 4, 2))
        assert env.get_action_mask().sum() == 16
