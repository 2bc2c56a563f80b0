"""
Cell module for Minesweeper game.

Represents individual grid positions with their visibility
(hidden/revealed/marked) and content (mine/adjacent count).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Visibility states of a cell. Exactly one applies at a time."""

    HIDDEN = auto()
    REVEALED = auto()
    MARKED = auto()


# Rendering symbols
SYMBOL_HIDDEN = "H"
SYMBOL_MARKED = "F"
SYMBOL_MINE = "M"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        has_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in the 8 neighbouring cells (0-8).
        state: Current visibility (hidden, revealed, or marked).
    """

    has_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if the cell went from hidden to revealed, False if it
            was already revealed or is marked.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_mark(self) -> bool:
        """
        Flip between hidden and marked.

        Returns:
            True if the mark was toggled, False if the cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.MARKED
        else:
            self.state = CellState.HIDDEN
        return True

    def clear_mark(self) -> bool:
        """Return a marked cell to hidden. True if a mark was removed."""
        if self.state != CellState.MARKED:
            return False
        self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_marked(self) -> bool:
        """Check if cell is marked."""
        return self.state == CellState.MARKED

    def to_symbol(self, exploded: bool = False) -> str:
        """
        Convert cell to its rendering symbol.

        Args:
            exploded: Whether the board has exploded; every mine is
                shown once it has.

        Returns:
            "M" for a shown mine, "H" hidden, "F" marked, otherwise the
            adjacent mine count as a digit.
        """
        if self.has_mine and (exploded or self.is_revealed):
            return SYMBOL_MINE
        if self.state == CellState.HIDDEN:
            return SYMBOL_HIDDEN
        if self.state == CellState.MARKED:
            return SYMBOL_MARKED
        return str(self.adjacent_mines)

    def to_observation(self, exploded: bool = False) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Shown mine (revealed, or any mine after an explosion)
        """
        if self.has_mine and (exploded or self.is_revealed):
            return 9
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.MARKED:
            return -2
        return self.adjacent_mines
