"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, Cell, Difficulty, EASY


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default easy board (8x10, 10 mines)."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a reproducible 10x10 board with 20 mines."""
    return Board(BoardConfig(10, 10, 20), seed=123)


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def crowded_board() -> Board:
    """6x6 board asking for more mines than it can hold."""
    return Board(BoardConfig(6, 6, 100), seed=7)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(has_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(100.0)


@pytest.fixture
def easy() -> Difficulty:
    return EASY


@pytest.fixture
def crowded() -> Difficulty:
    """Preset whose first reveal at a corner wins immediately."""
    return Difficulty("crowded", rows=6, cols=6, mines=100)


@pytest.fixture
def dense() -> Difficulty:
    """Preset dense enough that the first reveal never ends the game."""
    return Difficulty("dense", rows=8, cols=10, mines=40)
