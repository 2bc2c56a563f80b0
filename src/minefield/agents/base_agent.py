"""
Base agent interface for Minesweeper players.

An agent looks at ``Board.get_observation`` and names the next cell to
reveal as a flat action index.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """Abstract base class for automated players."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick the next cell to reveal.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional flat mask of revealable cells; derived
                from the observation when omitted.

        Returns:
            Action index (row * cols + col).
        """

    def action_to_position(self, action: int) -> Tuple[int, int]:
        """Split a flat action index into (row, col)."""
        return divmod(action, self.cols)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """Flat mask of hidden cells (observation value -1)."""
        return observation.flatten() == -1

    def reset(self) -> None:
        """Forget per-game state before a new board."""
