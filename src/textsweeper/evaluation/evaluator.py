"""
Evaluator for automated Minesweeper players.

Plays whole games directly on a board engine and summarises how far an
agent gets: wins, moves, and how many safe cells it uncovered before
hitting a mine.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

import numpy as np

from ..agents import BaseAgent
from ..game.board import BoardConfig, BoardEngine, GameStatus, configure

logger = logging.getLogger(__name__)


# ============================================================================
# Records
# ============================================================================

@dataclass(frozen=True)
class GameRecord:
    """
    Outcome of a single game.

    Attributes:
        status: Terminal status of the game.
        moves: Number of reveals the agent made.
        cells_revealed: Safe cells uncovered, flood fill included.
    """

    status: GameStatus
    moves: int
    cells_revealed: int

    @property
    def lost_on_first_move(self) -> bool:
        return self.status == GameStatus.LOST and self.moves == 1


@dataclass(frozen=True)
class EvaluationReport:
    """Summary of a batch of games on one board configuration."""

    config: BoardConfig
    games: int
    wins: int
    avg_moves: float
    avg_revealed: float
    avg_revealed_before_loss: float
    first_move_losses: int

    @property
    def losses(self) -> int:
        return self.games - self.wins

    @property
    def win_rate(self) -> float:
        return self.wins / self.games

    @property
    def avg_cleared_fraction(self) -> float:
        """Average share of the safe cells uncovered per game."""
        return self.avg_revealed / self.config.num_safe_cells

    @classmethod
    def from_records(
        cls, config: BoardConfig, records: List[GameRecord]
    ) -> "EvaluationReport":
        revealed = np.array([r.cells_revealed for r in records], dtype=float)
        lost = np.array([r.status == GameStatus.LOST for r in records])
        return cls(
            config=config,
            games=len(records),
            wins=int(np.count_nonzero(~lost)),
            avg_moves=float(np.mean([r.moves for r in records])),
            avg_revealed=float(revealed.mean()),
            avg_revealed_before_loss=(
                float(revealed[lost].mean()) if lost.any() else 0.0
            ),
            first_move_losses=sum(r.lost_on_first_move for r in records),
        )


# ============================================================================
# Evaluator
# ============================================================================

class Evaluator:
    """
    Play batches of games for an agent on a fixed board configuration.

    All games draw their mines from one seeded engine, so a given seed
    replays the same sequence of boards.
    """

    def __init__(
        self,
        board_config: Optional[BoardConfig] = None,
        num_games: int = 100,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            board_config: Board configuration (default: difficulty tier 1).
            num_games: Number of games per evaluation, at least one.
            seed: Seed for mine placement.
        """
        if num_games < 1:
            raise ValueError(f"num_games must be at least 1, got {num_games}")
        self.board_config = board_config or configure(1)
        self.num_games = num_games
        self.seed = seed

    def play_game(self, engine: BoardEngine, agent: BaseAgent) -> GameRecord:
        """
        Play one game to a terminal status on a freshly reset engine.

        Raises:
            ValueError: If the agent picks a cell that is already shown.
        """
        engine.reset()
        agent.new_game()
        moves = 0

        while engine.is_playing:
            index = agent.choose_cell(engine.player_board)
            engine.reveal(index)
            moves += 1
            if not engine.last_revealed:
                raise ValueError(
                    f"Agent {agent.name!r} chose cell {index}, which is already shown"
                )

        results = engine.results()
        return GameRecord(
            status=engine.status(),
            moves=moves,
            cells_revealed=(
                self.board_config.num_safe_cells - results.remaining_safe_cells
            ),
        )

    def evaluate(self, agent: BaseAgent) -> EvaluationReport:
        """Play ``num_games`` games and summarise them."""
        engine = BoardEngine(self.board_config, seed=self.seed)
        records = [self.play_game(engine, agent) for _ in range(self.num_games)]
        report = EvaluationReport.from_records(self.board_config, records)
        logger.info(
            "%s on %dx%d/%d: %d/%d wins",
            agent.name, self.board_config.order, self.board_config.order,
            self.board_config.num_mines, report.wins, report.games,
        )
        return report


def evaluate_tiers(
    make_agent: Callable[[], BaseAgent],
    tiers: Iterable[int],
    num_games: int = 100,
    seed: Optional[int] = None,
) -> Dict[int, EvaluationReport]:
    """
    Evaluate a fresh agent on each difficulty tier.

    Args:
        make_agent: Factory returning a new agent per tier.
        tiers: Difficulty tiers to play.
        num_games: Games per tier.
        seed: Seed shared by every tier's engine.

    Returns:
        Dictionary of tier -> report.
    """
    return {
        tier: Evaluator(configure(tier), num_games, seed).evaluate(make_agent())
        for tier in tiers
    }
