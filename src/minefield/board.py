"""
Board module for Minesweeper game.

Implements the game board with lazy mine placement, flood reveal,
marking, and terminal state detection.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Tuple, Optional

import numpy as np

from .cell import Cell, CellState


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

# Cells within this Chebyshev distance of the first reveal never get a mine
SAFE_RADIUS = 2


class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Requested mines. Clamped when the mines are placed if
            the board has too few eligible cells.
    """

    rows: int = 8
    cols: int = 10
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class BoardStatus:
    """Snapshot of the board counters."""

    done: bool
    exploded: bool
    rows: int
    cols: int
    marked_count: int
    revealed_count: int
    mines_placed: int


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Manages the grid of cells, mine placement, revealing logic,
    and win/lose conditions. A board lives for exactly one game; start a
    new game by building a new board.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _rng: random.Random = field(init=False, repr=False)
    _mines_placed: int = 0
    _marked_count: int = 0
    _revealed_count: int = 0
    _exploded: bool = False
    _placement_done: bool = False
    _outcome: Optional[GameState] = None

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._rng = random.Random(self.seed)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = [
            [Cell() for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def _place_mines(self, row: int, col: int) -> None:
        """
        Place mines randomly, away from the triggering cell.

        Uses a partial Fisher-Yates shuffle over the eligible positions.
        Marks placed before this point are cleared.

        Args:
            row: Row of the first reveal.
            col: Column of the first reveal.
        """
        self._placement_done = True
        eligible = self._get_eligible_mine_positions(row, col)
        self._mines_placed = min(self.config.num_mines, len(eligible))

        for i in range(self._mines_placed):
            j = self._rng.randint(i, len(eligible) - 1)
            eligible[i], eligible[j] = eligible[j], eligible[i]
            mine_row, mine_col = eligible[i]
            self._grid[mine_row][mine_col].has_mine = True

        for grid_row in self._grid:
            for cell in grid_row:
                cell.clear_mark()
        self._marked_count = 0

        self._calculate_adjacent_mines()

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Placed %d of %d requested mines around (%d, %d):\n%s",
                self._mines_placed, self.config.num_mines, row, col,
                self._layout_dump(),
            )

    def _get_eligible_mine_positions(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """Get positions farther than SAFE_RADIUS from (row, col)."""
        positions = []
        for r in range(self.config.rows):
            for c in range(self.config.cols):
                if abs(row - r) > SAFE_RADIUS or abs(col - c) > SAFE_RADIUS:
                    positions.append((r, c))
        return positions

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                count = self._count_adjacent_mines(row, col)
                self._grid[row][col].adjacent_mines = count

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self._get_neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].has_mine:
                count += 1
        return count

    def _layout_dump(self) -> str:
        """Mines ("B"/".") next to counts, one line per row."""
        lines = []
        for grid_row in self._grid:
            mines = "".join("B" if cell.has_mine else "." for cell in grid_row)
            counts = "".join(str(cell.adjacent_mines) for cell in grid_row)
            lines.append(f"{mines}  |  {counts}")
        return "\n".join(lines)

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def _get_neighbors(
        self, row: int, col: int
    ) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for valid neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self._is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def _is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, row: int, col: int) -> bool:
        """
        Reveal a cell at the given position.

        The first reveal places the mines, keeping the 5x5 area around
        this cell clear. A cell with no adjacent mines floods outwards to
        its neighbours. Revealing a mine explodes the board.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            True if the move was accepted (an explosion included), False
            if the position is off the board or not hidden.
        """
        if not self._is_valid_position(row, col):
            return False

        if not self._placement_done:
            self._place_mines(row, col)

        target = self._grid[row][col]
        if target.state != CellState.HIDDEN:
            return False

        if target.has_mine:
            target.reveal()
            self._revealed_count += 1
            self._exploded = True
            logger.debug("Mine revealed at (%d, %d)", row, col)
        else:
            self._flood_reveal(row, col)

        if self._outcome is None and self.is_done:
            self._outcome = GameState.LOST if self._exploded else GameState.WON
        return True

    def _flood_reveal(self, row: int, col: int) -> None:
        """Reveal the zero-count region reachable from (row, col)."""
        stack = [(row, col)]
        while stack:
            r, c = stack.pop()
            cell = self._grid[r][c]
            if not cell.reveal():
                continue
            self._revealed_count += 1
            if cell.has_mine or cell.adjacent_mines != 0:
                continue
            for neighbor_row, neighbor_col in self._get_neighbors(r, c):
                if self._grid[neighbor_row][neighbor_col].is_hidden:
                    stack.append((neighbor_row, neighbor_col))

    def toggle_mark(self, row: int, col: int) -> bool:
        """
        Toggle the mark on a cell.

        The board does not limit how many marks are placed.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if the mark was toggled, False otherwise.
        """
        if not self._is_valid_position(row, col):
            return False
        cell = self._grid[row][col]
        if not cell.toggle_mark():
            return False
        self._marked_count += 1 if cell.is_marked else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def render(self) -> Tuple[Tuple[str, ...], ...]:
        """
        Render the board as rows of symbols.

        Returns:
            Immutable grid of "H" (hidden), "F" (marked), "M" (shown mine)
            or "0".."8" (revealed count).
        """
        rendering = []
        for grid_row in self._grid:
            symbols = tuple(cell.to_symbol(self._exploded) for cell in grid_row)
            if len(symbols) != self.config.cols:
                raise RuntimeError("wrong number of columns in rendering")
            rendering.append(symbols)
        return tuple(rendering)

    def status(self) -> BoardStatus:
        """Get a snapshot of the board counters."""
        return BoardStatus(
            done=self.is_done,
            exploded=self._exploded,
            rows=self.config.rows,
            cols=self.config.cols,
            marked_count=self._marked_count,
            revealed_count=self._revealed_count,
            mines_placed=self._mines_placed,
        )

    @property
    def is_done(self) -> bool:
        """Check if the game reached a terminal state."""
        safe_cells = self.config.total_cells - self._mines_placed
        return self._exploded or self._revealed_count == safe_cells

    @property
    def game_state(self) -> GameState:
        """
        Get current game state.

        Settled by the move that ends the game: a mine revealed after a
        win leaves the state at WON even though the board has exploded.
        """
        if self._outcome is None:
            return GameState.PLAYING
        return self._outcome

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.game_state == GameState.LOST

    @property
    def exploded(self) -> bool:
        return self._exploded

    @property
    def mines_placed(self) -> int:
        return self._mines_placed

    @property
    def marked_count(self) -> int:
        return self._marked_count

    @property
    def revealed_count(self) -> int:
        return self._revealed_count

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self._is_valid_position(row, col):
            return None
        return self._grid[row][col]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = marked
                0-8 = revealed with adjacent count
                9 = shown mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                obs[row, col] = self._grid[row][col].to_observation(
                    self._exploded
                )
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can be revealed.

        Returns:
            List of (row, col) positions that are hidden.
        """
        actions = []
        for row in range(self.config.rows):
            for col in range(self.config.cols):
                if self._grid[row][col].state == CellState.HIDDEN:
                    actions.append((row, col))
        return actions
