"""
Command-line front end for Minesweeper.

Usage:
    python main.py play [--difficulty {easy,medium,hard}] [--seed N]
    python main.py simulate [--games N] [--difficulty ...] [--seed N]
"""
import argparse
import logging
from typing import Callable, Dict, List, Optional

from .agents import RandomAgent
from .board import GameState
from .difficulty import DIFFICULTIES, DEFAULT_DIFFICULTY, Difficulty, get_difficulty
from .environment import MinesweeperEnv
from .session import GameSession


logger = logging.getLogger(__name__)

PLAY_HELP = (
    "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), "
    "d NAME (difficulty), q (quit)"
)


# ============================================================================
# Rendering
# ============================================================================

def format_board(session: GameSession) -> str:
    """Render the session board with row and column headers."""
    rendering = session.board.render()
    cols = session.difficulty.cols
    width = len(str(max(session.difficulty.rows, cols) - 1))
    header = " " * (width + 1) + " ".join(str(c).rjust(width) for c in range(cols))
    lines = [header]
    for row_index, row in enumerate(rendering):
        cells = " ".join(symbol.rjust(width) for symbol in row)
        lines.append(f"{str(row_index).rjust(width)} {cells}")
    return "\n".join(lines)


def format_status(session: GameSession) -> str:
    """One-line summary of difficulty, time and flags."""
    line = (
        f"[{session.difficulty.name}] time {session.elapsed:.0f}s | "
        f"flags left {session.flags_remaining}"
    )
    if session.outcome == GameState.WON:
        best = session.best_time
        line += f" | YOU WIN (best {best:.0f}s)" if best is not None else " | YOU WIN"
    elif session.outcome == GameState.LOST:
        line += " | BOOM, game over"
    return line


# ============================================================================
# Interactive Play
# ============================================================================

def handle_command(session: GameSession, line: str) -> Optional[str]:
    """
    Apply one interactive command to the session.

    Args:
        session: Session to drive.
        line: Raw input line.

    Returns:
        A message for the player, or None when the player quits.
    """
    parts = line.split()
    if not parts:
        return PLAY_HELP
    command, args = parts[0].lower(), parts[1:]

    if command in ("q", "quit"):
        return None
    if command in ("n", "new"):
        session.new_game()
        return "New game."
    if command in ("d", "difficulty"):
        if len(args) != 1:
            return PLAY_HELP
        try:
            session.new_game(get_difficulty(args[0]))
        except ValueError as exc:
            return str(exc)
        return f"New {session.difficulty.name} game."
    if command in ("r", "f", "reveal", "flag"):
        if len(args) != 2:
            return PLAY_HELP
        try:
            row, col = int(args[0]), int(args[1])
        except ValueError:
            return PLAY_HELP
        if session.is_over:
            return "Game over. Type n for a new game."
        action = session.primary if command in ("r", "reveal") else session.secondary
        if not action(row, col):
            return f"Move at ({row}, {col}) rejected."
        return ""
    return PLAY_HELP


def play(
    args: argparse.Namespace,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Run an interactive game on the terminal."""
    session = GameSession(resolve_difficulty(args), seed=args.seed)
    write(PLAY_HELP)
    while True:
        write(format_board(session))
        write(format_status(session))
        try:
            line = read("> ")
        except EOFError:
            break
        message = handle_command(session, line)
        if message is None:
            break
        if message:
            write(message)


# ============================================================================
# Batch Simulation
# ============================================================================

def simulate_games(
    difficulty: Difficulty,
    games: int,
    seed: Optional[int] = None,
) -> Dict[str, float]:
    """
    Play games with the random agent.

    Returns:
        Dict with win_rate, avg_steps and avg_revealed.
    """
    env = MinesweeperEnv(config=difficulty.board_config())
    agent = RandomAgent(difficulty.rows, difficulty.cols, seed=seed)

    wins = 0
    steps: List[int] = []
    revealed: List[int] = []

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)
        agent.reset()
        done = False
        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            row, col = agent.action_to_position(action)
            logger.debug("Game %d reveals (%d, %d)", game + 1, row, col)
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated
        if info["game_state"] == GameState.WON.name:
            wins += 1
        steps.append(info["steps"])
        revealed.append(info["revealed"])
        logger.debug("Game %d finished: %s", game + 1, info["game_state"])

    env.close()
    if games == 0:
        return {"win_rate": 0.0, "avg_steps": 0.0, "avg_revealed": 0.0}
    return {
        "win_rate": wins / games,
        "avg_steps": sum(steps) / games,
        "avg_revealed": sum(revealed) / games,
    }


def simulate(args: argparse.Namespace) -> None:
    """Simulate random play and print results."""
    difficulty = resolve_difficulty(args)
    print(
        f"Simulating {args.games} {difficulty.name} games "
        f"({difficulty.rows}x{difficulty.cols}, {difficulty.mines} mines)..."
    )
    results = simulate_games(difficulty, args.games, seed=args.seed)
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")


# ============================================================================
# Argument Parsing
# ============================================================================

def resolve_difficulty(args: argparse.Namespace) -> Difficulty:
    """Pick the preset, applying any --rows/--cols/--mines overrides."""
    preset = get_difficulty(args.difficulty)
    overrides = (args.rows, args.cols, args.mines)
    if all(value is None for value in overrides):
        return preset
    return Difficulty(
        "custom",
        rows=args.rows if args.rows is not None else preset.rows,
        cols=args.cols if args.cols is not None else preset.cols,
        mines=args.mines if args.mines is not None else preset.mines,
    )


def _add_board_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--difficulty",
        choices=sorted(DIFFICULTIES),
        default=DEFAULT_DIFFICULTY.name,
        help="Board preset",
    )
    parser.add_argument("--rows", type=int, default=None, help="Override rows")
    parser.add_argument("--cols", type=int, default=None, help="Override columns")
    parser.add_argument("--mines", type=int, default=None, help="Override mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minesweeper - play or simulate games"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_board_arguments(play_parser)

    simulate_parser = subparsers.add_parser(
        "simulate", help="Play games with the random agent"
    )
    _add_board_arguments(simulate_parser)
    simulate_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except ValueError as exc:
        parser.error(str(exc))
