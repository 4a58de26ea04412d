"""
Minesweeper game module.

Provides the board-state engine, cell symbols and the Gymnasium
environment built on top of the engine.
"""
from .cell import CellPosition, EMPTY, EXPLODED_MINE, HIDDEN, MINE
from .board import (
    BoardAllocationError,
    BoardConfig,
    BoardEngine,
    BoardError,
    DIFFICULTY_TIERS,
    GameResults,
    GameStatus,
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    configure,
)
from .environment import MinesweeperEnv

__all__ = [
    "CellPosition",
    "EMPTY",
    "EXPLODED_MINE",
    "HIDDEN",
    "MINE",
    "BoardAllocationError",
    "BoardConfig",
    "BoardEngine",
    "BoardError",
    "DIFFICULTY_TIERS",
    "GameResults",
    "GameStatus",
    "MAX_DIFFICULTY",
    "MIN_DIFFICULTY",
    "configure",
    "MinesweeperEnv",
]
