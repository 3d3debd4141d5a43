"""
Command-line entry point for terminal Minesweeper.

Usage:
    python main.py [--width W] [--height H] [--mines N] [--seed S]
                   [--unique-mines] [--no-color]
"""
import argparse
from typing import List, Optional

from rich.console import Console

from .board import DEFAULT, Board, BoardConfig
from .renderer import TerminalRenderer
from .session import EndState, Session


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal"
    )
    parser.add_argument(
        "--width", type=int, default=DEFAULT.width, help="Number of columns"
    )
    parser.add_argument(
        "--height", type=int, default=DEFAULT.height, help="Number of rows"
    )
    parser.add_argument(
        "--mines",
        type=int,
        default=DEFAULT.num_mines,
        help="Number of mine placements (repeats may overlap)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for a replayable game"
    )
    parser.add_argument(
        "--unique-mines",
        action="store_true",
        help="Place exactly --mines distinct mines",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse arguments and play one game.

    Returns:
        Process exit status: 0 when the game ends normally, 1 when input
        could not be read.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = BoardConfig(
            width=args.width,
            height=args.height,
            num_mines=args.mines,
            allow_duplicate_placement=not args.unique_mines,
        )
    except ValueError as error:
        parser.error(str(error))

    session = Session(
        Board(config, seed=args.seed),
        renderer=TerminalRenderer(),
        console=Console(no_color=args.no_color, highlight=False),
        error_console=Console(stderr=True, highlight=False),
    )
    end_state = session.run()
    return 1 if end_state == EndState.ABORTED else 0
