"""
Board module for Minesweeper game.

Implements the board-state engine: mine placement, adjacency counting,
flood-fill revealing and game status. Cells are addressed by flat index
``row * order + col`` on a square grid of side ``order``.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .cell import (
    EMPTY,
    EXPLODED_MINE,
    HIDDEN,
    MINE,
    CellPosition,
    count_symbol,
    symbol_to_observation,
)

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


class BoardError(Exception):
    """Base error raised by the board engine."""


class BoardAllocationError(BoardError):
    """Board structures could not be allocated."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a square Minesweeper board.

    Attributes:
        order: Side length of the grid.
        num_mines: Total mines to place.
    """

    order: int = 4
    num_mines: int = 2

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.order < 1:
            raise ValueError("Board order must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.size - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.order * self.order

    @property
    def num_safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.size - self.num_mines


@dataclass(frozen=True)
class GameResults:
    """Counters reported to the player."""

    remaining_mines: int
    remaining_safe_cells: int


# Preset difficulty levels
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

DIFFICULTY_TIERS: Dict[int, BoardConfig] = {
    1: BoardConfig(4, 2),
    2: BoardConfig(5, 4),
    3: BoardConfig(7, 10),
    4: BoardConfig(9, 19),
    5: BoardConfig(9, 23),
}


def configure(difficulty: int) -> BoardConfig:
    """
    Map a difficulty tier to its board configuration.

    Tiers outside the table fall back to tier 1. Callers are expected to
    validate the tier before calling.
    """
    return DIFFICULTY_TIERS.get(difficulty, DIFFICULTY_TIERS[MIN_DIFFICULTY])


# ============================================================================
# Board Engine
# ============================================================================

class BoardEngine:
    """
    Minesweeper board-state engine.

    Owns the mine layout, the adjacency board, the visited flags and the
    player board, and derives the game status from reveals. All of them
    are rebuilt together by :meth:`reset`.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            config: Board configuration (default: difficulty tier 1).
            seed: Random seed for mine placement.
        """
        self._config = config or configure(MIN_DIFFICULTY)
        self._rng = random.Random(seed)

        self._mine_layout: Optional[np.ndarray] = None
        self._visited: Optional[np.ndarray] = None
        self._adjacency_board: List[str] = []
        self._player_board: List[str] = []
        self._remaining_mines = 0
        self._remaining_safe_cells = 0
        self._status = GameStatus.IN_PROGRESS
        self._last_revealed: List[int] = []

    # ========================================================================
    # Configuration
    # ========================================================================

    def configure(self, difficulty: int) -> BoardConfig:
        """Select the board used by the next :meth:`reset`."""
        self._config = configure(difficulty)
        return self._config

    def seed(self, value: Optional[int]) -> None:
        """Re-seed the mine placement generator."""
        self._rng.seed(value)

    @property
    def config(self) -> BoardConfig:
        """Current board configuration."""
        return self._config

    @property
    def order(self) -> int:
        """Side length of the grid."""
        return self._config.order

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._config.size

    @property
    def num_mines(self) -> int:
        """Number of mines on the board."""
        return self._config.num_mines

    # ========================================================================
    # Board Initialization (Low-level)
    # ========================================================================

    def reset(self, mine_positions: Optional[Iterable[int]] = None) -> None:
        """
        Build every board structure for a new game.

        The structures are built first and only replace the current game
        once all of them exist, so a failed reset leaves the engine as it was.

        Args:
            mine_positions: Explicit flat indices of the mines. When omitted
                the mines are placed at random.

        Raises:
            BoardAllocationError: If the board structures cannot be allocated.
            ValueError: If ``mine_positions`` does not hold exactly
                ``num_mines`` distinct indices on the board.
        """
        positions = None
        if mine_positions is not None:
            positions = self._check_mine_positions(mine_positions)

        try:
            mine_layout = self._build_mine_layout(positions)
            player_board = [HIDDEN] * self.size
            visited = mine_layout.copy()
            adjacency_board = self._build_adjacency_board(mine_layout)
        except MemoryError as exc:
            raise BoardAllocationError(
                f"Cannot allocate a board of {self.size} cells"
            ) from exc

        self._mine_layout = mine_layout
        self._player_board = player_board
        self._visited = visited
        self._adjacency_board = adjacency_board
        self._remaining_mines = self.num_mines
        self._remaining_safe_cells = self._config.num_safe_cells
        self._status = GameStatus.IN_PROGRESS
        self._last_revealed = []
        logger.debug(
            "New %dx%d board with %d mines",
            self.order, self.order, self.num_mines,
        )

    def _check_mine_positions(self, mine_positions: Iterable[int]) -> List[int]:
        """Validate explicit mine indices against the configuration."""
        positions = set(mine_positions)
        if len(positions) != self.num_mines:
            raise ValueError(
                f"Expected {self.num_mines} distinct mine positions, "
                f"got {len(positions)}"
            )
        for index in positions:
            if not 0 <= index < self.size:
                raise ValueError(f"Mine position {index} is off the board")
        return sorted(positions)

    def _build_mine_layout(self, positions: Optional[List[int]]) -> np.ndarray:
        """Place the mines, at random or at already validated indices."""
        mine_layout = np.zeros(self.size, dtype=bool)
        if positions is not None:
            mine_layout[positions] = True
            return mine_layout

        placed = 0
        while placed < self.num_mines:
            index = self._rng.randrange(self.size)
            if not mine_layout[index]:
                mine_layout[index] = True
                placed += 1
        return mine_layout

    def _build_adjacency_board(self, mine_layout: np.ndarray) -> List[str]:
        """Compute the mine marker or neighbour count of every cell."""
        return [
            MINE if mine_layout[index]
            else count_symbol(self._count_mines_around(mine_layout, index))
            for index in range(self.size)
        ]

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def index_of(self, row: int, col: int) -> int:
        """Convert (row, col) position to flat index."""
        return row * self.order + col

    def position_of(self, index: int) -> Tuple[int, int]:
        """Convert flat index to (row, col) position."""
        return index // self.order, index % self.order

    def classify_position(self, index: int) -> CellPosition:
        """Classify a cell as a corner, an edge or an interior cell."""
        self._check_index(index)
        row, col = self.position_of(index)
        return CellPosition.classify(row, col, self.order)

    def neighbors(self, index: int) -> List[int]:
        """
        Get the flat indices of the cells around ``index``.

        Returns:
            3 indices for a corner, 5 for an edge and 8 for an interior cell.
        """
        self._check_index(index)
        row, col = self.position_of(index)
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append(self.index_of(new_row, new_col))
        return neighbors

    def count_adjacent_mines(self, index: int) -> int:
        """Count mines adjacent to a specific cell."""
        self._require_board()
        return self._count_mines_around(self._mine_layout, index)

    def _count_mines_around(self, mine_layout: np.ndarray, index: int) -> int:
        return sum(1 for neighbor in self.neighbors(index) if mine_layout[neighbor])

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.order and 0 <= col < self.order

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(
                f"Cell index {index} out of range for board of {self.size} cells"
            )

    def _require_board(self) -> None:
        if self._mine_layout is None:
            raise BoardError("Board has not been reset")

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, index: int) -> GameStatus:
        """
        Reveal the cell at ``index``.

        A mine loses the game. A safe cell shows its adjacent mine count,
        and a cell with no adjacent mines also reveals the whole connected
        empty region around it plus its numbered border.

        Args:
            index: Flat index of the cell to reveal.

        Returns:
            The game status after the reveal.
        """
        self._require_board()
        self._check_index(index)
        self._last_revealed = []

        if self._status != GameStatus.IN_PROGRESS:
            logger.debug("Ignoring reveal of %d: game is over", index)
            return self._status

        if self._mine_layout[index]:
            self._player_board[index] = EXPLODED_MINE
            self._last_revealed.append(index)
            self._status = GameStatus.LOST
            logger.debug("Mine hit at %d", index)
            return self._status

        self._reveal_safe_cell(index)
        self._status = self._derive_status()
        if self._status == GameStatus.WON:
            logger.debug("All safe cells revealed")
        return self._status

    def _reveal_safe_cell(self, index: int) -> None:
        """Show a safe cell and flood fill from it when it is empty."""
        self._player_board[index] = self._adjacency_board[index]
        if self._visited[index]:
            return
        self._visit(index)

        pending = [index] if self._adjacency_board[index] == EMPTY else []
        while pending:
            current = pending.pop()
            for neighbor in self.neighbors(current):
                if self._visited[neighbor] or self._mine_layout[neighbor]:
                    continue
                self._player_board[neighbor] = self._adjacency_board[neighbor]
                self._visit(neighbor)
                if self._adjacency_board[neighbor] == EMPTY:
                    pending.append(neighbor)

        if len(self._last_revealed) > 1:
            logger.debug(
                "Flood fill from %d revealed %d cells",
                index, len(self._last_revealed),
            )

    def _visit(self, index: int) -> None:
        self._visited[index] = True
        self._remaining_safe_cells -= 1
        self._last_revealed.append(index)

    def _derive_status(self) -> GameStatus:
        if self._remaining_safe_cells == 0:
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    def results(self) -> GameResults:
        """Get the remaining mine and safe cell counters."""
        return GameResults(
            remaining_mines=self._remaining_mines,
            remaining_safe_cells=self._remaining_safe_cells,
        )

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def last_revealed(self) -> Tuple[int, ...]:
        """Indices disclosed by the most recent reveal, in reveal order."""
        return tuple(self._last_revealed)

    @property
    def player_board(self) -> Tuple[str, ...]:
        """Symbols currently shown to the player."""
        self._require_board()
        return tuple(self._player_board)

    @property
    def adjacency_board(self) -> Tuple[str, ...]:
        """Mine marker or adjacent mine count of every cell."""
        self._require_board()
        return tuple(self._adjacency_board)

    @property
    def mine_layout(self) -> np.ndarray:
        """Copy of the boolean mine layout."""
        self._require_board()
        return self._mine_layout.copy()

    def is_visited(self, index: int) -> bool:
        """Check if a cell is a mine or has been revealed."""
        self._require_board()
        self._check_index(index)
        return bool(self._visited[index])

    def is_revealed(self, index: int) -> bool:
        """Check if a cell is shown on the player board."""
        self._require_board()
        self._check_index(index)
        return self._player_board[index] != HIDDEN

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        self._require_board()
        obs = np.array(
            [symbol_to_observation(symbol) for symbol in self._player_board],
            dtype=np.int8,
        )
        return obs.reshape(self.order, self.order)

    def get_valid_actions(self) -> List[int]:
        """
        Get list of cells that can still be revealed.

        Returns:
            Flat indices of hidden cells.
        """
        self._require_board()
        return [
            index for index, symbol in enumerate(self._player_board)
            if symbol == HIDDEN
        ]
