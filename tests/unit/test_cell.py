"""
Unit tests for cell symbols and position classification.
"""
import pytest
from textsweeper.game.cell import (
    EXPLODED_MINE,
    HIDDEN,
    CellPosition,
    count_symbol,
    symbol_to_observation,
)


# ============================================================================
# Symbol Tests
# ============================================================================

class TestSymbols:
    """Test conversions between counts, symbols and observations."""

    def test_count_symbol_is_digit(self) -> None:
        """Counts 0-8 map to their digit."""
        assert [count_symbol(n) for n in range(9)] == list("012345678")

    def test_count_symbol_rejects_nine(self) -> None:
        """A cell cannot have more than 8 neighbours."""
        with pytest.raises(ValueError, match="out of range"):
            count_symbol(9)

    def test_hidden_observation(self) -> None:
        """Hidden cells are observed as -1."""
        assert symbol_to_observation(HIDDEN) == -1

    def test_exploded_mine_observation(self) -> None:
        """An exploded mine is observed as 9."""
        assert symbol_to_observation(EXPLODED_MINE) == 9

    def test_count_observation(self) -> None:
        """Revealed counts are observed as their value."""
        assert symbol_to_observation("3") == 3


# ============================================================================
# Classification Tests
# ============================================================================

class TestCellPosition:
    """Test corner, edge and interior classification."""

    @pytest.mark.parametrize(
        "row, col, expected",
        [
            (0, 0, CellPosition.UPPER_LEFT_CORNER),
            (0, 3, CellPosition.UPPER_RIGHT_CORNER),
            (3, 0, CellPosition.LOWER_LEFT_CORNER),
            (3, 3, CellPosition.LOWER_RIGHT_CORNER),
            (0, 1, CellPosition.TOP_EDGE),
            (3, 2, CellPosition.BOTTOM_EDGE),
            (2, 0, CellPosition.LEFT_EDGE),
            (1, 3, CellPosition.RIGHT_EDGE),
            (1, 1, CellPosition.INTERIOR),
            (2, 2, CellPosition.INTERIOR),
        ],
    )
    def test_classify_on_order_four(
        self, row: int, col: int, expected: CellPosition
    ) -> None:
        """Every region of a 4x4 grid is classified."""
        assert CellPosition.classify(row, col, 4) == expected

    def test_single_cell_board_is_corner(self) -> None:
        """The only cell of a 1x1 grid is a corner."""
        assert CellPosition.classify(0, 0, 1).is_corner is True

    def test_corner_and_edge_flags(self) -> None:
        """Corner and edge flags are exclusive."""
        assert CellPosition.LOWER_RIGHT_CORNER.is_corner is True
        assert CellPosition.LOWER_RIGHT_CORNER.is_edge is False
        assert CellPosition.LEFT_EDGE.is_edge is True
        assert CellPosition.INTERIOR.is_corner is False
        assert CellPosition.INTERIOR.is_edge is False
