"""
Unit tests for Cell class.

Tests cell visibility transitions, rendering symbols, and observation
conversion.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        assert Cell().has_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell().adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed and change state."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is True

    def test_reveal_marked_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a marked cell."""
        hidden_cell.toggle_mark()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_marked is True


# ============================================================================
# Cell Mark Tests
# ============================================================================

class TestCellMark:
    """Test cell marking behavior."""

    def test_mark_hidden_cell(self, hidden_cell: Cell) -> None:
        """Marking a hidden cell should succeed."""
        assert hidden_cell.toggle_mark() is True
        assert hidden_cell.state == CellState.MARKED

    def test_unmark_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Toggling twice should return the cell to hidden."""
        hidden_cell.toggle_mark()
        assert hidden_cell.toggle_mark() is True
        assert hidden_cell.is_hidden is True

    def test_mark_revealed_cell_fails(self, hidden_cell: Cell) -> None:
        """Cannot mark a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_mark() is False
        assert hidden_cell.is_revealed is True

    def test_clear_mark(self, hidden_cell: Cell) -> None:
        """clear_mark only acts on marked cells."""
        assert hidden_cell.clear_mark() is False
        hidden_cell.toggle_mark()
        assert hidden_cell.clear_mark() is True
        assert hidden_cell.is_hidden is True


# ============================================================================
# Cell Symbol Tests
# ============================================================================

class TestCellSymbol:
    """Test rendering symbols."""

    def test_hidden_symbol(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_symbol() == "H"

    def test_marked_symbol(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_mark()
        assert hidden_cell.to_symbol() == "F"

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_symbol_is_count(self, count: int) -> None:
        """Revealed safe cell shows its adjacent count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_symbol() == str(count)

    def test_revealed_mine_symbol(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_symbol() == "M"

    def test_hidden_mine_stays_hidden_until_explosion(
        self, mine_cell: Cell
    ) -> None:
        """A hidden mine is only shown once the board exploded."""
        assert mine_cell.to_symbol() == "H"
        assert mine_cell.to_symbol(exploded=True) == "M"

    def test_marked_mine_shown_after_explosion(self, mine_cell: Cell) -> None:
        mine_cell.toggle_mark()
        assert mine_cell.to_symbol() == "F"
        assert mine_cell.to_symbol(exploded=True) == "M"


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values for agents."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        assert hidden_cell.to_observation() == -1

    def test_marked_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        hidden_cell.toggle_mark()
        assert hidden_cell.to_observation() == -2

    def test_revealed_cell_observation_matches_count(self) -> None:
        cell = Cell(adjacent_mines=3)
        cell.reveal()
        assert cell.to_observation() == 3

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
