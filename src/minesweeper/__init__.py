"""
Minesweeper game module.

Provides the board engine, a colorized terminal renderer and the
line-oriented session that plays one game.
"""
from .tile import Tile, TileState, MINE, SAFE, FLAGGED_SAFE, FLAGGED_MINE
from .board import Board, BoardConfig, RevealOutcome, DEFAULT
from .commands import (
    Action,
    Command,
    CommandError,
    EmptyCommandError,
    MalformedCommandError,
    OutOfBoundsError,
    UnrecognizedCommandError,
    parse_command,
)
from .renderer import Renderer, TerminalRenderer
from .session import EndState, Session

__all__ = [
    "Tile",
    "TileState",
    "MINE",
    "SAFE",
    "FLAGGED_SAFE",
    "FLAGGED_MINE",
    "Board",
    "BoardConfig",
    "RevealOutcome",
    "DEFAULT",
    "Action",
    "Command",
    "CommandError",
    "EmptyCommandError",
    "MalformedCommandError",
    "OutOfBoundsError",
    "UnrecognizedCommandError",
    "parse_command",
    "Renderer",
    "TerminalRenderer",
    "EndState",
    "Session",
]
