"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, and observation conversion.
"""
import pytest
from minefield import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_cell_keeps_position(self) -> None:
        """Cell should store its row and column."""
        cell = Cell(3, 7)
        assert (cell.row, cell.col) == (3, 7)

    def test_default_cell_is_not_mine(self, hidden_cell: Cell) -> None:
        """New cell should not be a mine by default."""
        assert hidden_cell.is_mine is False

    def test_default_cell_is_hidden(self, hidden_cell: Cell) -> None:
        """New cell should be hidden by default."""
        assert hidden_cell.state == CellState.HIDDEN
        assert hidden_cell.is_hidden is True
        assert hidden_cell.is_revealed is False
        assert hidden_cell.is_flagged is False
        assert hidden_cell.is_exploded is False

    def test_default_cell_has_zero_adjacent_mines(
        self, hidden_cell: Cell
    ) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert hidden_cell.adjacent_mines == 0


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.state == CellState.REVEALED

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_revealed is False

    def test_explode_marks_revealed_and_exploded(self, mine_cell: Cell) -> None:
        """Exploding a mine reveals it."""
        mine_cell.explode()
        assert mine_cell.is_revealed is True
        assert mine_cell.is_exploded is True
        assert mine_cell.is_flagged is False


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED
        assert hidden_cell.is_flagged is True
        assert hidden_cell.is_hidden is False

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.state == CellState.HIDDEN

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_flagged is False


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation(self, hidden_cell: Cell) -> None:
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation(self, hidden_cell: Cell) -> None:
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(0, 0, adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation(self, mine_cell: Cell) -> None:
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9

    def test_exploded_mine_observation(self, mine_cell: Cell) -> None:
        mine_cell.explode()
        assert mine_cell.to_observation() == 10
