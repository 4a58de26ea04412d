"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from textsweeper.game import BoardConfig, BoardEngine, MinesweeperEnv


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> BoardEngine:
    """Create a tier 1 engine (4x4, 2 mines) with random mines."""
    engine = BoardEngine(seed=1234)
    engine.reset()
    return engine


@pytest.fixture
def corner_center_engine() -> BoardEngine:
    """Create a 3x3 board with mines in the upper left corner and center."""
    engine = BoardEngine(BoardConfig(3, 2))
    engine.reset(mine_positions=[0, 4])
    return engine


@pytest.fixture
def diagonal_engine() -> BoardEngine:
    """Create a 4x4 board with mines at indices 5 and 10."""
    engine = BoardEngine(BoardConfig(4, 2))
    engine.reset(mine_positions=[5, 10])
    return engine


@pytest.fixture
def wall_engine() -> BoardEngine:
    """Create a 5x5 board with a full column of mines down the middle."""
    engine = BoardEngine(BoardConfig(5, 5))
    engine.reset(mine_positions=[2, 7, 12, 17, 22])
    return engine


@pytest.fixture
def tiny_engine() -> BoardEngine:
    """Create a 2x2 board with one mine in the upper left corner."""
    engine = BoardEngine(BoardConfig(2, 1))
    engine.reset(mine_positions=[0])
    return engine


@pytest.fixture
def empty_engine() -> BoardEngine:
    """Create a board with no mines for cascade testing."""
    engine = BoardEngine(BoardConfig(5, 0))
    engine.reset()
    return engine


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture
def env() -> MinesweeperEnv:
    """Create a tier 1 environment."""
    return MinesweeperEnv(difficulty=1, render_mode="ansi")
