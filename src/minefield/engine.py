"""
Engine module for the minefield game.

Owns the grid and session state, and implements deferred mine
placement, revealing, flag bookkeeping and win/lose transitions.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .grid import Grid, create_grid, flatten, is_valid_position
from .placement import calculate_adjacency, place_mines
from .reveal import flood_reveal, reveal_all_mines


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


STATUS_MESSAGES: Dict[GameStatus, str] = {
    GameStatus.PLAYING: "Find all the safe tiles without detonating a mine.",
    GameStatus.LOST: "Boom! You hit a mine.",
    GameStatus.WON: "You cleared the minefield!",
}


@dataclass(frozen=True)
class Difficulty:
    """
    Named grid configuration.

    Attributes:
        label: Display name of the difficulty.
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    label: str
    rows: int
    cols: int
    mines: int

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Grid dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.rows * self.cols - 1
        if self.mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be revealed to win."""
        return self.rows * self.cols - self.mines


# Preset difficulty levels
BEGINNER = Difficulty("Beginner", 9, 9, 10)
INTERMEDIATE = Difficulty("Intermediate", 16, 16, 40)
EXPERT = Difficulty("Expert", 16, 30, 99)

DIFFICULTIES: Tuple[Difficulty, ...] = (BEGINNER, INTERMEDIATE, EXPERT)


def find_difficulty(label: str) -> Optional[Difficulty]:
    """Get the preset with the given label, or None if unknown."""
    for difficulty in DIFFICULTIES:
        if difficulty.label == label:
            return difficulty
    return None


# ============================================================================
# Engine Class
# ============================================================================

@dataclass
class Engine:
    """
    Minefield game engine.

    Mines are not placed until the first reveal, so the first revealed
    cell is always safe. Invalid actions are ignored and reported by a
    False return value.
    """

    _difficulty: Difficulty = BEGINNER
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _grid: Grid = field(default_factory=list, repr=False)
    _status: GameStatus = GameStatus.PLAYING
    _remaining_flags: int = 0
    _revealed_safe_count: int = 0
    _mines_placed: bool = False

    def __post_init__(self) -> None:
        """Build the first game after dataclass creation."""
        self.reset()

    # ========================================================================
    # Game Setup
    # ========================================================================

    def reset(self, difficulty: Optional[Difficulty] = None) -> None:
        """
        Start a new game.

        Args:
            difficulty: Difficulty for the new game; keeps the current
                one when omitted.
        """
        if difficulty is not None:
            self._difficulty = difficulty

        self._grid = create_grid(self._difficulty.rows, self._difficulty.cols)
        self._status = GameStatus.PLAYING
        self._remaining_flags = self._difficulty.mines
        self._revealed_safe_count = 0
        self._mines_placed = False
        logger.debug("New game: %s", self._difficulty)

    def change_difficulty(self, label: str) -> bool:
        """
        Switch to a preset difficulty by label and start a new game.

        Returns:
            True if the label matched a preset, False otherwise.
        """
        difficulty = find_difficulty(label)
        if difficulty is None:
            return False
        self.reset(difficulty)
        return True

    def _ensure_mines_placed(self, row: int, col: int) -> None:
        """Place mines and compute counts on the first reveal."""
        if self._mines_placed:
            return
        place_mines(self._grid, self._difficulty.mines, row, col, self.rng)
        calculate_adjacency(self._grid)
        self._mines_placed = True

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal the cell at the given position.

        Revealing a mine loses the game. Revealing a cell with no
        adjacent mines also opens its surrounding area.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the reveal was performed, False if it was ignored.
        """
        if not self._can_reveal(row, col):
            return False

        self._ensure_mines_placed(row, col)
        cell = self._grid[row][col]

        if cell.is_mine:
            self._trigger_mine(cell)
            return True

        self._revealed_safe_count += flood_reveal(self._grid, cell)
        self._check_win_condition()
        return True

    def _can_reveal(self, row: int, col: int) -> bool:
        """Check if a cell can be revealed."""
        if self._status != GameStatus.PLAYING:
            return False
        if not is_valid_position(self._grid, row, col):
            return False
        cell = self._grid[row][col]
        return not cell.is_flagged and not cell.is_revealed

    def _trigger_mine(self, cell: Cell) -> None:
        """End the game on a revealed mine."""
        cell.explode()
        self._status = GameStatus.LOST
        self._remaining_flags += reveal_all_mines(self._grid)
        logger.debug("Mine hit at (%d, %d)", cell.row, cell.col)

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._revealed_safe_count == self._difficulty.safe_cells:
            self._status = GameStatus.WON
            self._remaining_flags += reveal_all_mines(self._grid)
            logger.debug("Minefield cleared")

    def toggle_flag(self, row: int, col: int) -> bool:
        """
        Toggle flag on a hidden cell.

        A new flag is rejected once every flag has been used.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the flag was toggled, False otherwise.
        """
        if self._status != GameStatus.PLAYING:
            return False
        if not is_valid_position(self._grid, row, col):
            return False

        cell = self._grid[row][col]
        if cell.is_revealed:
            return False

        if cell.is_flagged:
            cell.toggle_flag()
            self._remaining_flags += 1
            return True

        if self._remaining_flags <= 0:
            return False
        cell.toggle_flag()
        self._remaining_flags -= 1
        return True

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Get current game status."""
        return self._status

    @property
    def status_message(self) -> str:
        """Get the player-facing message for the current status."""
        return STATUS_MESSAGES[self._status]

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._status == GameStatus.LOST

    @property
    def remaining_flags(self) -> int:
        return self._remaining_flags

    @property
    def revealed_safe_count(self) -> int:
        return self._revealed_safe_count

    @property
    def mines_placed(self) -> bool:
        return self._mines_placed

    @property
    def difficulty(self) -> Difficulty:
        """Get the difficulty of the current game."""
        return self._difficulty

    @property
    def rows(self) -> int:
        return self._difficulty.rows

    @property
    def cols(self) -> int:
        return self._difficulty.cols

    @property
    def total_mines(self) -> int:
        return self._difficulty.mines

    @property
    def safe_cells(self) -> int:
        return self._difficulty.safe_cells

    @property
    def cells(self) -> List[Cell]:
        """Get all cells in row-major order."""
        return flatten(self._grid)

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not is_valid_position(self._grid, row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get grid state as a numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
                10 = exploded mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in flatten(self._grid):
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can currently be revealed.

        Returns:
            List of (row, col) positions, empty once the game is over.
        """
        if self._status != GameStatus.PLAYING:
            return []
        return [
            (cell.row, cell.col) for cell in flatten(self._grid)
            if cell.is_hidden
        ]
