"""
Difficulty presets for Minesweeper.

Each preset fixes the board size and the number of mines, which is also
the flag budget a session hands to the player.
"""
from dataclasses import dataclass
from typing import Dict

from .board import BoardConfig


@dataclass(frozen=True)
class Difficulty:
    """
    A named board preset.

    Attributes:
        name: Lookup key, also used to key best times.
        rows: Number of rows.
        cols: Number of columns.
        mines: Requested mines and flag budget.
    """

    name: str
    rows: int
    cols: int
    mines: int

    def board_config(self) -> BoardConfig:
        """Build the board configuration for this preset."""
        return BoardConfig(rows=self.rows, cols=self.cols, num_mines=self.mines)


EASY = Difficulty("easy", rows=8, cols=10, mines=10)
MEDIUM = Difficulty("medium", rows=14, cols=18, mines=40)
HARD = Difficulty("hard", rows=20, cols=24, mines=99)

DIFFICULTIES: Dict[str, Difficulty] = {
    preset.name: preset for preset in (EASY, MEDIUM, HARD)
}
DEFAULT_DIFFICULTY = EASY


def get_difficulty(name: str) -> Difficulty:
    """
    Look up a preset by name, ignoring case.

    Raises:
        ValueError: If no preset has that name.
    """
    try:
        return DIFFICULTIES[name.strip().lower()]
    except KeyError:
        known = ", ".join(DIFFICULTIES)
        raise ValueError(f"Unknown difficulty {name!r} (expected one of: {known})") from None
