"""
Grid module for the minefield engine.

A grid is a rectangular list of rows of cells. Adjacency is always
computed from coordinates; cells never hold references to each other.
"""
from typing import List

from .cell import Cell


Grid = List[List[Cell]]


# ============================================================================
# Grid Construction
# ============================================================================

def create_grid(rows: int, cols: int) -> Grid:
    """
    Create a fresh grid with no mines, flags or revealed cells.

    Args:
        rows: Number of rows.
        cols: Number of columns.

    Returns:
        A rows x cols grid of default cells.
    """
    if rows < 1 or cols < 1:
        raise ValueError("Grid dimensions must be positive")
    return [[Cell(row, col) for col in range(cols)] for row in range(rows)]


def flatten(grid: Grid) -> List[Cell]:
    """Get all cells in row-major order."""
    return [cell for row in grid for cell in row]


# ============================================================================
# Neighbor Utilities
# ============================================================================

def is_valid_position(grid: Grid, row: int, col: int) -> bool:
    """Check if position is within grid bounds."""
    return 0 <= row < len(grid) and 0 <= col < len(grid[0])


def neighbors(grid: Grid, row: int, col: int) -> List[Cell]:
    """
    Get the cells surrounding a position, clipped to grid bounds.

    Corner cells have 3 neighbors, edge cells 5 and interior cells 8.
    Neighbors are returned in row-major order.

    Args:
        grid: Grid to inspect.
        row: Row index of center cell.
        col: Column index of center cell.

    Returns:
        List of neighboring cells.
    """
    result = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if is_valid_position(grid, new_row, new_col):
                result.append(grid[new_row][new_col])
    return result
