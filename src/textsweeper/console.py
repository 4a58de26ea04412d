"""
Console front end for the Minesweeper engine.

Usage:
    textsweeper play [--seed N]
    textsweeper simulate [--difficulty N] [--games N] [--seed N]
"""
import argparse
import logging
from typing import Dict, Optional, Sequence, Tuple

from .agents import RandomAgent
from .evaluation import EvaluationReport, evaluate_tiers
from .game.board import (
    MAX_DIFFICULTY,
    MIN_DIFFICULTY,
    BoardAllocationError,
    BoardEngine,
    GameStatus,
)
from .game.cell import HIDDEN

logger = logging.getLogger(__name__)


# ============================================================================
# Rendering
# ============================================================================

def render_board(symbols: Sequence[str], order: int) -> str:
    """
    Format a board as a grid with x indices on top and y indices on the left.

    Args:
        symbols: One symbol per cell in flat index order.
        order: Side length of the board.
    """
    lines = ["   (x) " + " ".join(str(col) for col in range(order)), "(y)"]
    for row in range(order):
        cells = symbols[row * order:(row + 1) * order]
        lines.append(f" {row:<5}|" + "|".join(cells) + "|")
    return "\n".join(lines)


# ============================================================================
# Input Validation
# ============================================================================

def is_difficulty_valid(difficulty: int) -> bool:
    """Check that the difficulty is one of the preset tiers."""
    return MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY


def parse_difficulty(text: str) -> Optional[int]:
    """Parse a difficulty answer, or None if it is not a valid tier."""
    try:
        difficulty = int(text.strip())
    except ValueError:
        return None
    return difficulty if is_difficulty_valid(difficulty) else None


def parse_coordinates(text: str) -> Optional[Tuple[int, int]]:
    """Parse "x y" into a pair of integers, or None if malformed."""
    parts = text.split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def are_coordinates_valid(engine: BoardEngine, x: int, y: int) -> bool:
    """Check that (x, y) is on the board and still hidden."""
    if not (0 <= x < engine.order and 0 <= y < engine.order):
        return False
    return engine.player_board[engine.index_of(y, x)] == HIDDEN


# ============================================================================
# Interactive Game
# ============================================================================

BANNER = "\n".join([
    "M     M  II  N     N  E E E E  S S S S  W            W  E E E E  E E E E  P P P P  E E E E  R R R  ",
    "M M M M  II  N N   N  E        S         W          W   E        E        P     P  E        R     R",
    "M  M  M  II  N  N  N  E E E    S S S S    W   WW   W    E E E    E E E    P P P P  E E E    R R R  ",
    "M     M  II  N   N N  E              S     W W  W W     E        E        P        E        R    R ",
    "M     M  II  N     N  E E E E  S S S S      W    W      E E E E  E E E E  P        E E E E  R     R",
])

INTRO = (
    "\n\nWelcome to the game:\n\n"
    f"{BANNER}\n\n"
    "Version created by: Angel del Ojo Jimenez, July 2019\n"
)


def ask_for_difficulty() -> int:
    """Ask the player for a difficulty until a valid tier is given."""
    while True:
        answer = input(
            f"Introduce desired difficulty ({MIN_DIFFICULTY}-{MAX_DIFFICULTY}): "
        )
        difficulty = parse_difficulty(answer)
        if difficulty is not None:
            return difficulty
        print("Incorrect difficulty, please try again\n")


def ask_for_cell(engine: BoardEngine) -> int:
    """Ask for coordinates until a hidden cell on the board is given."""
    while True:
        answer = input(
            "Introduce desired point's coordinates x and y separated by a space: "
        )
        coordinates = parse_coordinates(answer)
        if coordinates is None:
            print(f"\nPlease introduce two integers in range [0, {engine.order - 1}]\n")
            continue
        x, y = coordinates
        if not (0 <= x < engine.order and 0 <= y < engine.order):
            print(f"\nPlease introduce coordinates in range [0, {engine.order - 1}]\n")
        elif not are_coordinates_valid(engine, x, y):
            print("\nPlease introduce an element that is not repeated\n")
        else:
            return engine.index_of(y, x)


def shall_play_again() -> bool:
    """Ask the player whether to start another game."""
    while True:
        answer = input("Want to play again? (Y/N): ").strip().lower()
        if answer == "y":
            return True
        if answer == "n":
            return False
        print("\nI'm sorry but I did not understand you.\n")


def play_game(engine: BoardEngine) -> GameStatus:
    """Play one game on an engine that has already been reset."""
    print(f"{engine.num_mines} mines on this board\n")
    print(render_board(engine.player_board, engine.order) + "\n")

    status = engine.status()
    while status == GameStatus.IN_PROGRESS:
        status = engine.reveal(ask_for_cell(engine))
        print("\n" + render_board(engine.player_board, engine.order) + "\n")

    print("Board with all the results\n")
    print(render_board(engine.adjacency_board, engine.order) + "\n")
    print("You Won!\n" if status == GameStatus.WON else "You Lost!\n")
    return status


def play(args: argparse.Namespace) -> int:
    """Run interactive games until the player stops."""
    engine = BoardEngine(seed=args.seed)
    while True:
        print(INTRO)
        engine.configure(ask_for_difficulty())
        try:
            engine.reset()
        except BoardAllocationError:
            logger.exception("Board allocation failed")
            print("Error allocating memory, please restart application")
            return 1
        play_game(engine)
        if not shall_play_again():
            return 0


# ============================================================================
# Simulation
# ============================================================================

def positive_int(text: str) -> int:
    """argparse type accepting integers of at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def format_reports(reports: Dict[int, EvaluationReport]) -> str:
    """Lay out one row of metrics per difficulty tier."""
    lines = [
        f"{'Tier':<6}{'Board':<10}{'Win Rate':>10}{'Avg Moves':>11}"
        f"{'Cleared':>10}{'Before Loss':>13}{'1st Move':>10}",
        "-" * 70,
    ]
    for tier, report in reports.items():
        config = report.config
        board = f"{config.order}x{config.order}/{config.num_mines}"
        lines.append(
            f"{tier:<6}{board:<10}{report.win_rate:>10.1%}"
            f"{report.avg_moves:>11.1f}{report.avg_cleared_fraction:>10.1%}"
            f"{report.avg_revealed_before_loss:>13.1f}"
            f"{report.first_move_losses:>10}"
        )
    return "\n".join(lines)


def simulate(args: argparse.Namespace) -> int:
    """Let the random agent play every requested tier and print the results."""
    if args.difficulty is None:
        tiers = list(range(MIN_DIFFICULTY, MAX_DIFFICULTY + 1))
    else:
        tiers = [args.difficulty]

    print(f"\nRandom agent, {args.games} games per tier\n")
    reports = evaluate_tiers(
        lambda: RandomAgent(seed=args.seed), tiers, args.games, args.seed
    )
    print(format_reports(reports))
    return 0


# ============================================================================
# Entry Point
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="textsweeper - play Minesweeper in the terminal"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    simulate_parser = subparsers.add_parser(
        "simulate", help="Let the random agent play each difficulty tier"
    )
    simulate_parser.add_argument(
        "--difficulty",
        type=int,
        choices=range(MIN_DIFFICULTY, MAX_DIFFICULTY + 1),
        default=None,
        help="Difficulty tier (default: all tiers)",
    )
    simulate_parser.add_argument(
        "--games", type=positive_int, default=100, help="Games per tier"
    )
    simulate_parser.add_argument(
        "--seed", type=int, default=None, help="Random seed"
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "simulate":
        return simulate(args)
    parser.print_help()
    return 0
