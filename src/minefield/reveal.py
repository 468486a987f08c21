"""
Reveal propagation for the minefield engine.
"""
from typing import List

from .cell import Cell
from .grid import Grid, flatten, neighbors


def flood_reveal(grid: Grid, start: Cell) -> int:
    """
    Reveal a safe cell and open its surrounding area.

    When a revealed cell has no adjacent mines, every neighbor that is
    neither revealed nor flagged is revealed as well. Flagged cells are
    never opened.

    Args:
        grid: Grid containing the start cell.
        start: Safe, hidden cell to reveal.

    Returns:
        Number of cells transitioned to revealed.
    """
    revealed = 0
    stack: List[Cell] = [start]

    while stack:
        cell = stack.pop()
        if cell.is_mine or not cell.reveal():
            continue
        revealed += 1

        if cell.adjacent_mines == 0:
            stack.extend(
                neighbor for neighbor in neighbors(grid, cell.row, cell.col)
                if not neighbor.is_revealed and not neighbor.is_flagged
            )

    return revealed


def reveal_all_mines(grid: Grid) -> int:
    """
    Reveal every mine on the grid, removing flags from them.

    Returns:
        Number of flags removed from mines.
    """
    unflagged = 0
    for cell in flatten(grid):
        if cell.is_mine:
            if cell.is_flagged:
                cell.is_flagged = False
                unflagged += 1
            cell.is_revealed = True
    return unflagged
