"""
Renderer module for Minesweeper game.

Turns a board into a colorized text frame with 1-based column and row
headers and a border.
"""
from abc import ABC, abstractmethod
from typing import Dict, Tuple

from rich.text import Text

from .board import Board
from .tile import Tile, TileState


# ============================================================================
# Constants
# ============================================================================

FRAME_STYLE = "bright_black"

COUNT_STYLES: Dict[int, str] = {
    1: "blue",
    2: "green",
    3: "bright_red",
    4: "magenta",
    5: "red",
    6: "cyan",
    7: "white",
    8: "bright_black",
}

# (glyph, style) per unrevealed state, while playing and once game over
PLAYING_GLYPHS: Dict[TileState, Tuple[str, str]] = {
    TileState.MINE: ("-", "white"),
    TileState.SAFE: ("-", "white"),
    TileState.FLAGGED_SAFE: ("F", "yellow"),
    TileState.FLAGGED_MINE: ("F", "yellow"),
}

GAME_OVER_GLYPHS: Dict[TileState, Tuple[str, str]] = {
    TileState.MINE: ("X", "red"),
    TileState.SAFE: ("-", "bright_white"),
    TileState.FLAGGED_SAFE: ("F", "yellow"),
    TileState.FLAGGED_MINE: ("!", "yellow"),
}


# ============================================================================
# Renderer Interface
# ============================================================================

class Renderer(ABC):
    """
    Abstract base class for board renderers.

    A renderer reads the board's tiles and game_over flag and never
    mutates the board.
    """

    @abstractmethod
    def render(self, board: Board) -> Text:
        """
        Produce one frame for the current board state.

        Args:
            board: Board to draw.

        Returns:
            Rich text ready to print to a console.
        """
        pass


# ============================================================================
# Terminal Renderer
# ============================================================================

class TerminalRenderer(Renderer):
    """Draws the board as a grid of colored glyphs."""

    def glyph(self, tile: Tile, game_over: bool) -> Tuple[str, str]:
        """
        Get the glyph and style for a tile.

        Args:
            tile: Tile to draw.
            game_over: Whether the mine layout should be shown.

        Returns:
            (character, rich style) pair.
        """
        if tile.is_revealed:
            if tile.adjacent_mines == 0:
                return " ", "white"
            return str(tile.adjacent_mines), COUNT_STYLES[tile.adjacent_mines]
        glyphs = GAME_OVER_GLYPHS if game_over else PLAYING_GLYPHS
        return glyphs[tile.state]

    def render(self, board: Board) -> Text:
        """Render the board with headers and border."""
        text = Text()

        text.append("     ")
        for x in range(board.width):
            text.append(f"{x + 1:<2}", style=FRAME_STYLE)
            text.append(" ")
        text.append("\n")

        text.append("   ")
        text.append("+" + "---" * board.width, style=FRAME_STYLE)
        text.append("\n")

        for y in range(board.height):
            text.append(f"{y + 1:>2}", style=FRAME_STYLE)
            text.append(" ")
            text.append("|", style=FRAME_STYLE)
            text.append(" ")
            for x in range(board.width):
                char, style = self.glyph(board.get_tile(x, y), board.game_over)
                text.append(char, style=style)
                text.append("  ")
            text.append("\n")

        return text
