"""
Mine placement for the minefield engine.

Mines are placed lazily on the first reveal so that the first
revealed cell is never a mine.
"""
import logging
import random
from typing import List, Optional, Tuple

from .grid import Grid, neighbors


logger = logging.getLogger(__name__)


def _candidate_positions(
    grid: Grid, safe_row: int, safe_col: int
) -> List[Tuple[int, int]]:
    """Get all positions that may hold a mine, in row-major order."""
    positions = []
    for row in range(len(grid)):
        for col in range(len(grid[0])):
            if (row, col) != (safe_row, safe_col):
                positions.append((row, col))
    return positions


def _shuffle(positions: List[Tuple[int, int]], rng) -> None:
    """Fisher-Yates shuffle in place."""
    for i in range(len(positions) - 1, 0, -1):
        j = rng.randrange(i + 1)
        positions[i], positions[j] = positions[j], positions[i]


def place_mines(
    grid: Grid,
    mine_count: int,
    safe_row: int,
    safe_col: int,
    rng: Optional[random.Random] = None,
) -> List[Tuple[int, int]]:
    """
    Place mines uniformly at random, keeping one cell mine-free.

    Args:
        grid: Grid to mutate.
        mine_count: Requested number of mines; clamped to the number
            of candidate cells.
        safe_row: Row of the cell that must stay mine-free.
        safe_col: Column of the cell that must stay mine-free.
        rng: Source providing randrange(); defaults to the random module.

    Returns:
        List of (row, col) positions that received a mine.
    """
    rng = rng if rng is not None else random
    positions = _candidate_positions(grid, safe_row, safe_col)
    _shuffle(positions, rng)

    mine_positions = positions[:min(mine_count, len(positions))]
    for row, col in mine_positions:
        grid[row][col].is_mine = True

    logger.debug(
        "Placed %d mines avoiding (%d, %d)",
        len(mine_positions), safe_row, safe_col,
    )
    return mine_positions


def calculate_adjacency(grid: Grid) -> None:
    """Calculate adjacent mine counts for all cells."""
    for row in grid:
        for cell in row:
            cell.adjacent_mines = sum(
                1 for neighbor in neighbors(grid, cell.row, cell.col)
                if neighbor.is_mine
            )
