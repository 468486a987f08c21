"""
Cell module for the minefield engine.

Represents individual grid positions with their mine, reveal, flag
and adjacency state.
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the minefield grid.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the cell has been revealed.
        is_flagged: Whether the player has flagged the cell.
        is_exploded: Whether this is the mine that ended the game.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    row: int
    col: int
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    is_exploded: bool = False
    adjacent_mines: int = 0

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def explode(self) -> None:
        """Mark this mine as the one that ended the game."""
        self.is_flagged = False
        self.is_revealed = True
        self.is_exploded = True

    @property
    def state(self) -> CellState:
        """Get the visual state of the cell."""
        if self.is_revealed:
            return CellState.REVEALED
        if self.is_flagged:
            return CellState.FLAGGED
        return CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden and unflagged."""
        return not self.is_revealed and not self.is_flagged

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
            10: Exploded mine
        """
        if self.is_flagged:
            return -2
        if not self.is_revealed:
            return -1
        if self.is_exploded:
            return 10
        if self.is_mine:
            return 9
        return self.adjacent_mines
