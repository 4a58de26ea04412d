"""
Agent interface for automated Minesweeper players.

An agent sees only what a human player sees, the player board symbols,
and answers with the flat index of the next cell to reveal.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from ..game.cell import HIDDEN


class BaseAgent(ABC):
    """Abstract player driven by the evaluator."""

    name = "agent"

    @abstractmethod
    def choose_cell(self, player_board: Sequence[str]) -> int:
        """
        Pick the next cell to reveal.

        Args:
            player_board: Symbols shown to the player, in flat index order.

        Returns:
            Flat index of a hidden cell.
        """

    def new_game(self) -> None:
        """Forget anything learned about the previous board."""

    @staticmethod
    def hidden_cells(player_board: Sequence[str]) -> List[int]:
        """Flat indices still showing the hidden placeholder."""
        return [index for index, symbol in enumerate(player_board) if symbol == HIDDEN]
