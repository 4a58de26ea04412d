"""
Cell module for Minesweeper game.

Holds the per-cell symbols shown on the player and adjacency boards,
and the classification of a flat index by its place on the grid
(corner, edge or interior).
"""
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

HIDDEN = "-"
MINE = "X"
EXPLODED_MINE = "X"
EMPTY = "0"


def count_symbol(count: int) -> str:
    """Symbol for a safe cell with ``count`` adjacent mines."""
    if not 0 <= count <= 8:
        raise ValueError(f"Adjacent mine count out of range: {count}")
    return str(count)


def symbol_to_observation(symbol: str) -> int:
    """
    Convert a player board symbol to an observation value for agents.

    Returns:
        -1: Hidden cell
        0-8: Revealed cell with adjacent mine count
        9: Revealed mine (game over state)
    """
    if symbol == HIDDEN:
        return -1
    if symbol == EXPLODED_MINE:
        return 9
    return int(symbol)


# ============================================================================
# Cell Position
# ============================================================================

class CellPosition(Enum):
    """Where a cell sits on the square grid."""

    UPPER_LEFT_CORNER = auto()
    UPPER_RIGHT_CORNER = auto()
    LOWER_LEFT_CORNER = auto()
    LOWER_RIGHT_CORNER = auto()
    TOP_EDGE = auto()
    BOTTOM_EDGE = auto()
    LEFT_EDGE = auto()
    RIGHT_EDGE = auto()
    INTERIOR = auto()

    @property
    def is_corner(self) -> bool:
        """Check if position is one of the four corners."""
        return self in _CORNERS

    @property
    def is_edge(self) -> bool:
        """Check if position is on a border but not a corner."""
        return self in _EDGES

    @classmethod
    def classify(cls, row: int, col: int, order: int) -> "CellPosition":
        """
        Classify a (row, col) cell on a grid of side ``order``.

        A 1x1 grid has a single cell, reported as the upper left corner.
        """
        top = row == 0
        bottom = row == order - 1
        left = col == 0
        right = col == order - 1

        if top and left:
            return cls.UPPER_LEFT_CORNER
        if top and right:
            return cls.UPPER_RIGHT_CORNER
        if bottom and left:
            return cls.LOWER_LEFT_CORNER
        if bottom and right:
            return cls.LOWER_RIGHT_CORNER
        if top:
            return cls.TOP_EDGE
        if bottom:
            return cls.BOTTOM_EDGE
        if left:
            return cls.LEFT_EDGE
        if right:
            return cls.RIGHT_EDGE
        return cls.INTERIOR


_CORNERS = frozenset({
    CellPosition.UPPER_LEFT_CORNER,
    CellPosition.UPPER_RIGHT_CORNER,
    CellPosition.LOWER_LEFT_CORNER,
    CellPosition.LOWER_RIGHT_CORNER,
})

_EDGES = frozenset({
    CellPosition.TOP_EDGE,
    CellPosition.BOTTOM_EDGE,
    CellPosition.LEFT_EDGE,
    CellPosition.RIGHT_EDGE,
})
