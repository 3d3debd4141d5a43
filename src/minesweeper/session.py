"""
Session controller for terminal Minesweeper.

Reads one command per line, applies it to the board, redraws, and stops
on a win, a loss, a quit, or a failed read.
"""
import sys
from enum import Enum, auto
from typing import Optional, TextIO

from rich.console import Console

from .board import Board, RevealOutcome
from .commands import Action, CommandError, parse_command
from .renderer import Renderer, TerminalRenderer


# ============================================================================
# Constants
# ============================================================================

class EndState(Enum):
    """How a session finished."""

    WIN = auto()
    LOSS = auto()
    QUIT = auto()
    ABORTED = auto()


PROMPT = (
    "Enter Command: ",
    "- Flag (x) (y)",
    "- Reveal (x) (y)",
    "- Quit",
)

END_MESSAGES = {
    EndState.WIN: "YOU WIN!",
    EndState.LOSS: "YOU LOSE",
    EndState.QUIT: "Quitting!",
}

READ_FAILURE_MESSAGE = "Failed to read input!"


# ============================================================================
# Session
# ============================================================================

class Session:
    """
    One game of Minesweeper played over a line-oriented terminal.

    The session owns the board for the length of the game. Everything
    runs on the calling thread: a command is read, applied and drawn
    before the next one is read.
    """

    def __init__(
        self,
        board: Board,
        renderer: Optional[Renderer] = None,
        console: Optional[Console] = None,
        error_console: Optional[Console] = None,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            board: Fresh board to play on.
            renderer: Frame renderer (default: TerminalRenderer).
            console: Console for frames and messages (default: stdout).
            error_console: Console for fatal diagnostics (default: stderr).
            input_stream: Source of command lines (default: stdin).
        """
        self.board = board
        self.renderer = renderer or TerminalRenderer()
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(
            stderr=True, highlight=False
        )
        self.input_stream = input_stream or sys.stdin
        self.message: Optional[str] = None
        self.end_state: Optional[EndState] = None

    def run(self) -> EndState:
        """
        Play until the game ends.

        Returns:
            How the session finished.
        """
        while self.end_state is None:
            self._draw_turn()
            line = self._read_line()
            if line is None:
                self._finish(EndState.ABORTED)
                break
            self.step(line)
        return self.end_state

    def step(self, line: str) -> Optional[EndState]:
        """
        Apply one line of input to the board.

        Invalid input leaves the board untouched and stores a diagnostic
        for the next frame.

        Args:
            line: Raw command line.

        Returns:
            The end state if this line finished the game, else None.
        """
        self.message = None
        try:
            command = parse_command(line, self.board.width, self.board.height)
        except CommandError as error:
            self.message = str(error)
            return None

        if command.action == Action.QUIT:
            return self._finish(EndState.QUIT)
        if command.action == Action.FLAG:
            self.board.flag(command.x, command.y)
        elif self.board.reveal(command.x, command.y) == RevealOutcome.EXPLODED:
            return self._finish(EndState.LOSS)

        if self.board.is_solved():
            return self._finish(EndState.WIN)
        return None

    # ========================================================================
    # Terminal I/O
    # ========================================================================

    def _draw_turn(self) -> None:
        """Clear the screen and show the board, last diagnostic and prompt."""
        self.console.clear()
        self.console.print(self.renderer.render(self.board))
        if self.message:
            self.console.print(self.message)
        self.console.print()
        for line in PROMPT:
            self.console.print(line)

    def _read_line(self) -> Optional[str]:
        """Read one line, or None if input is closed or unreadable."""
        try:
            line = self.input_stream.readline()
        except (OSError, UnicodeDecodeError):
            return None
        if not line:
            return None
        return line

    def _finish(self, end_state: EndState) -> EndState:
        """End the game and show the closing screen."""
        self.end_state = end_state
        self.board.end_game()

        if end_state == EndState.ABORTED:
            self.error_console.print(READ_FAILURE_MESSAGE)
            return end_state

        self.console.clear()
        if end_state != EndState.QUIT:
            self.console.print(self.renderer.render(self.board))
        self.console.print(END_MESSAGES[end_state])
        return end_state
