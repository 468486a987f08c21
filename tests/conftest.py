"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src and the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (
    Cell, Difficulty, Engine, Grid, calculate_adjacency, create_grid, BEGINNER,
)


# ============================================================================
# Deterministic Randomness
# ============================================================================

class IdentityRandom:
    """
    Random source whose shuffle keeps the original order.

    Mines land on the first candidate cells in row-major order.
    """

    def randrange(self, stop: int) -> int:
        return stop - 1


def set_mines(grid: Grid, positions) -> None:
    """Place mines at fixed positions and compute adjacency."""
    for row, col in positions:
        grid[row][col].is_mine = True
    calculate_adjacency(grid)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def default_engine() -> Engine:
    """Create a seeded beginner engine."""
    return Engine(BEGINNER, rng=random.Random(1234))


@pytest.fixture
def small_engine() -> Engine:
    """Create a 3x3 engine with 1 mine placed at (0, 0) on first reveal."""
    return Engine(Difficulty("Small", 3, 3, 1), rng=IdentityRandom())


@pytest.fixture
def empty_engine() -> Engine:
    """Create an engine with no mines for cascade testing."""
    return Engine(Difficulty("Empty", 5, 5, 0))


@pytest.fixture
def identity_rng() -> IdentityRandom:
    """Random source that leaves candidate order untouched."""
    return IdentityRandom()


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def grid() -> Grid:
    """Create an empty 5x5 grid."""
    return create_grid(5, 5)


@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)
