"""
Minefield game module.

Provides the game engine including grid construction, mine placement,
reveal propagation and game state management.
"""
from .cell import Cell, CellState
from .grid import Grid, create_grid, flatten, neighbors, is_valid_position
from .placement import place_mines, calculate_adjacency
from .reveal import flood_reveal, reveal_all_mines
from .engine import (
    Engine,
    Difficulty,
    GameStatus,
    STATUS_MESSAGES,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    DIFFICULTIES,
    find_difficulty,
)
from .environment import MinefieldEnv, make_vec_env, render_text

__all__ = [
    "Cell",
    "CellState",
    "Grid",
    "create_grid",
    "flatten",
    "neighbors",
    "is_valid_position",
    "place_mines",
    "calculate_adjacency",
    "flood_reveal",
    "reveal_all_mines",
    "Engine",
    "Difficulty",
    "GameStatus",
    "STATUS_MESSAGES",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "DIFFICULTIES",
    "find_difficulty",
    "MinefieldEnv",
    "make_vec_env",
    "render_text",
]
