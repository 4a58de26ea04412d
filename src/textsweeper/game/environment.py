"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the board engine.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, BoardEngine, configure


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array of shape (order, order) where:
        - -1 = hidden cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = exploded mine

    Actions:
        Discrete action space of size order * order.
        Action i is the cell at flat index i (row * order + col).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for revealing a cell that is already shown
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        difficulty: Optional[int] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration. Takes precedence over difficulty.
            difficulty: Difficulty tier used when no config is given
                (default: tier 1).
            render_mode: How to render the environment.
        """
        super().__init__()

        if config is None:
            config = configure(difficulty if difficulty is not None else 1)
        self.config = config
        self.engine = BoardEngine(config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=-1,
            high=9,
            shape=(config.order, config.order),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(config.size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine.seed(seed)
        self.engine.reset()
        self._steps = 0

        return self.engine.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Cell index to reveal (row * order + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        self._steps += 1
        reward = self._calculate_reward(int(action))

        observation = self.engine.get_observation()
        terminated = not self.engine.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, index: int) -> float:
        """Reveal a cell and score the outcome."""
        if self.engine.is_revealed(index) or not self.engine.is_playing:
            return -0.1

        self.engine.reveal(index)

        if self.engine.is_won:
            return 10.0
        if self.engine.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        results = self.engine.results()
        total_safe = self.config.num_safe_cells
        return {
            "steps": self._steps,
            "revealed": total_safe - results.remaining_safe_cells,
            "total_safe": total_safe,
            "remaining_safe": results.remaining_safe_cells,
            "game_status": self.engine.status().name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self._render_ansi()
        if self.render_mode == "human":
            print(self._render_ansi())
        return None

    def _render_ansi(self) -> str:
        """Render the player board as rows of symbols."""
        board = self.engine.player_board
        order = self.config.order
        return "\n".join(
            " ".join(board[row * order:(row + 1) * order])
            for row in range(order)
        )

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[self.engine.get_valid_actions()] = True
        return mask
