"""
Command parsing for the Minesweeper session.

Grammar (space-delimited, tokens past the two coordinates are ignored):
    flag <x> <y>    or  f <x> <y>
    reveal <x> <y>  or  r <x> <y>
    quit

Coordinates are typed 1-based and returned 0-based.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import List


# ============================================================================
# Errors
# ============================================================================

class CommandError(ValueError):
    """A line of input that cannot be turned into a board command."""

    message = "Malformed command."

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.message)


class EmptyCommandError(CommandError):
    message = "Please input a command."


class UnrecognizedCommandError(CommandError):
    message = "Unrecognized command."


class MalformedCommandError(CommandError):
    message = "Malformed command."


class OutOfBoundsError(CommandError):
    message = "Location not on board."


# ============================================================================
# Commands
# ============================================================================

class Action(Enum):
    """What a command asks the board to do."""

    FLAG = auto()
    REVEAL = auto()
    QUIT = auto()


VERBS = {
    "flag": Action.FLAG,
    "f": Action.FLAG,
    "reveal": Action.REVEAL,
    "r": Action.REVEAL,
    "quit": Action.QUIT,
}


@dataclass(frozen=True)
class Command:
    """
    A parsed command.

    Attributes:
        action: Requested action.
        x: 0-based column (unused for quit).
        y: 0-based row (unused for quit).
    """

    action: Action
    x: int = 0
    y: int = 0


def parse_command(line: str, width: int, height: int) -> Command:
    """
    Parse one line of input against a board of the given size.

    Args:
        line: Raw input line.
        width: Board columns, the largest accepted x.
        height: Board rows, the largest accepted y.

    Returns:
        Parsed command with 0-based coordinates.

    Raises:
        EmptyCommandError: Line holds no tokens.
        UnrecognizedCommandError: First token is not a known verb.
        MalformedCommandError: Coordinates missing or not unsigned integers.
        OutOfBoundsError: Coordinates outside [1, width] x [1, height].
    """
    tokens = line.split()
    if not tokens:
        raise EmptyCommandError()

    action = VERBS.get(tokens[0])
    if action is None:
        raise UnrecognizedCommandError()
    if action == Action.QUIT:
        return Command(action)

    x, y = _parse_coordinates(tokens[1:3])
    if not (1 <= x <= width and 1 <= y <= height):
        raise OutOfBoundsError()
    return Command(action, x - 1, y - 1)


def _parse_coordinates(tokens: List[str]) -> List[int]:
    """Parse two unsigned decimal coordinates."""
    if len(tokens) != 2 or not all(token.isdecimal() for token in tokens):
        raise MalformedCommandError()
    return [int(token) for token in tokens]
