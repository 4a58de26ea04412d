"""
Random agent: reveals a uniformly chosen hidden cell every turn.
"""
from typing import Optional, Sequence

import numpy as np

from .base_agent import BaseAgent


class RandomAgent(BaseAgent):
    """Baseline player with no deduction at all."""

    name = "random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def choose_cell(self, player_board: Sequence[str]) -> int:
        hidden = self.hidden_cells(player_board)
        if not hidden:
            raise ValueError("No hidden cell left to reveal")
        return int(self.rng.choice(hidden))
