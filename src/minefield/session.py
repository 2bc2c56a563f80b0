"""
Game session controller.

Owns one board at a time and plays the part of the game's front end:
it turns primary and secondary actions into board moves, keeps the flag
budget, times the game and remembers the best time per difficulty.
"""
import logging
import time
from typing import Callable, Dict, Optional

from .board import Board, BoardStatus, GameState
from .cell import SYMBOL_HIDDEN, SYMBOL_MARKED
from .difficulty import Difficulty, DEFAULT_DIFFICULTY


logger = logging.getLogger(__name__)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Drives a sequence of games on fresh boards.

    The board is never reset in place: every new game or difficulty
    change builds a new one. Once a game is over the session refuses
    further moves until ``new_game`` is called.
    """

    def __init__(
        self,
        difficulty: Difficulty = DEFAULT_DIFFICULTY,
        seed: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the session and start the first game.

        Args:
            difficulty: Preset for the first game.
            seed: Seed for the first board; later boards derive theirs
                from it so a seeded session is reproducible.
            clock: Source of seconds for the game timer.
        """
        self._clock = clock
        self._seed = seed
        self._games_started = 0
        self.best_times: Dict[str, float] = {}
        self.difficulty = difficulty
        self.board = self._new_board()
        self._started_at: Optional[float] = None
        self._finished_at: Optional[float] = None
        self._outcome_recorded = False

    def _new_board(self) -> Board:
        seed = None
        if self._seed is not None:
            seed = self._seed + self._games_started
        self._games_started += 1
        return Board(self.difficulty.board_config(), seed=seed)

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def new_game(self, difficulty: Optional[Difficulty] = None) -> None:
        """
        Replace the board with a fresh one.

        Args:
            difficulty: New preset, or None to keep the current one.
        """
        if difficulty is not None:
            self.difficulty = difficulty
        self.board = self._new_board()
        self._started_at = None
        self._finished_at = None
        self._outcome_recorded = False
        logger.info(
            "New %s game: %dx%d with %d mines",
            self.difficulty.name, self.difficulty.rows,
            self.difficulty.cols, self.difficulty.mines,
        )

    # ========================================================================
    # Player Actions
    # ========================================================================

    def primary(self, row: int, col: int) -> bool:
        """
        Primary action: reveal a hidden cell.

        Marked cells are protected and never revealed from here.

        Returns:
            True if the board accepted the move.
        """
        if self.board.is_done:
            return False
        if self._symbol_at(row, col) != SYMBOL_HIDDEN:
            return False
        accepted = self.board.reveal(row, col)
        if accepted:
            self._after_move()
        return accepted

    def secondary(self, row: int, col: int) -> bool:
        """
        Secondary action: place or remove a flag.

        A flag is only placed while the flag budget lasts; removing one
        is always allowed.

        Returns:
            True if the board accepted the move.
        """
        if self.board.is_done:
            return False
        symbol = self._symbol_at(row, col)
        if symbol == SYMBOL_HIDDEN and self.flags_remaining <= 0:
            return False
        if symbol not in (SYMBOL_HIDDEN, SYMBOL_MARKED):
            return False
        accepted = self.board.toggle_mark(row, col)
        if accepted:
            self._after_move()
        return accepted

    def _symbol_at(self, row: int, col: int) -> Optional[str]:
        cell = self.board.get_cell(row, col)
        if cell is None:
            return None
        return cell.to_symbol(self.board.exploded)

    def _after_move(self) -> None:
        """Start the timer on the first move, settle the game at the end."""
        if self._started_at is None:
            self._started_at = self._clock()
        if self.board.is_done and not self._outcome_recorded:
            self._finish()

    def _finish(self) -> None:
        self._finished_at = self._clock()
        self._outcome_recorded = True
        elapsed = self.elapsed
        if self.board.is_won:
            best = self.best_times.get(self.difficulty.name)
            if best is None or elapsed < best:
                self.best_times[self.difficulty.name] = elapsed
            logger.info("Won %s game in %.1fs", self.difficulty.name, elapsed)
        else:
            logger.info("Lost %s game after %.1fs", self.difficulty.name, elapsed)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def flags_remaining(self) -> int:
        """Flags the player may still place."""
        return self.difficulty.mines - self.board.marked_count

    @property
    def elapsed(self) -> float:
        """Seconds since the first move, frozen once the game is over."""
        if self._started_at is None:
            return 0.0
        end = self._finished_at if self._finished_at is not None else self._clock()
        return end - self._started_at

    @property
    def outcome(self) -> GameState:
        return self.board.game_state

    @property
    def is_over(self) -> bool:
        return self.board.is_done

    @property
    def best_time(self) -> Optional[float]:
        """Best winning time for the current difficulty, if any."""
        return self.best_times.get(self.difficulty.name)

    def status(self) -> BoardStatus:
        return self.board.status()
