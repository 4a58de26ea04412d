"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
from textsweeper.game import BoardConfig, GameStatus, MinesweeperEnv


# ============================================================================
# Environment Tests
# ============================================================================

class TestSpaces:
    """Test observation and action spaces."""

    def test_spaces_follow_config(self) -> None:
        """Spaces are sized from the board order."""
        env = MinesweeperEnv(difficulty=3)
        assert env.observation_space.shape == (7, 7)
        assert env.action_space.n == 49

    def test_config_overrides_difficulty(self) -> None:
        """An explicit config wins over a tier."""
        env = MinesweeperEnv(config=BoardConfig(3, 1), difficulty=5)
        assert env.action_space.n == 9

    def test_reset_observation(self, env: MinesweeperEnv) -> None:
        """Reset returns a fully hidden board inside the space."""
        obs, info = env.reset(seed=0)
        assert env.observation_space.contains(obs)
        assert np.all(obs == -1)
        assert info["revealed"] == 0
        assert info["total_safe"] == 14
        assert info["game_status"] == GameStatus.IN_PROGRESS.name

    def test_seeded_reset_is_reproducible(self, env: MinesweeperEnv) -> None:
        """The same seed gives the same mines."""
        env.reset(seed=42)
        first = env.engine.mine_layout
        env.reset(seed=42)
        assert np.array_equal(first, env.engine.mine_layout)


class TestStep:
    """Test rewards and termination."""

    def _rigged(self, env: MinesweeperEnv) -> MinesweeperEnv:
        env.reset()
        env.engine.reset(mine_positions=[5, 10])
        return env

    def test_safe_reveal_reward(self, env: MinesweeperEnv) -> None:
        """A safe reveal scores +1 and keeps playing."""
        env = self._rigged(env)
        obs, reward, terminated, truncated, info = env.step(0)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[0, 0] == 1
        assert info["revealed"] == 1

    def test_repeat_reveal_penalty(self, env: MinesweeperEnv) -> None:
        """Revealing a shown cell is penalised and changes nothing."""
        env = self._rigged(env)
        env.step(3)
        _, reward, _, _, info = env.step(2)
        assert reward == -0.1
        assert info["revealed"] == 4

    def test_mine_terminates(self, env: MinesweeperEnv) -> None:
        """Hitting a mine scores -10 and ends the episode."""
        env = self._rigged(env)
        obs, reward, terminated, _, info = env.step(5)
        assert reward == -10.0
        assert terminated is True
        assert obs[1, 1] == 9
        assert info["game_status"] == "LOST"

    def test_win_terminates(self) -> None:
        """Revealing the last safe cell scores +10."""
        env = MinesweeperEnv(config=BoardConfig(2, 1))
        env.reset()
        env.engine.reset(mine_positions=[0])
        env.step(1)
        env.step(2)
        _, reward, terminated, _, info = env.step(3)
        assert reward == 10.0
        assert terminated is True
        assert info["remaining_safe"] == 0

    def test_action_mask(self, env: MinesweeperEnv) -> None:
        """The mask marks only hidden cells."""
        env = self._rigged(env)
        env.step(3)
        mask = env.get_action_mask()
        assert mask.dtype == bool
        assert mask.sum() == 12
        assert not mask[[2, 3, 6, 7]].any()

    def test_render_ansi(self, env: MinesweeperEnv) -> None:
        """ANSI rendering lists the player board row by row."""
        env = self._rigged(env)
        env.step(0)
        assert env.render().splitlines() == [
            "1 - - -",
            "- - - -",
            "- - - -",
            "- - - -",
        ]
