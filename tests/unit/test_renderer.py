"""
Unit tests for the terminal renderer.

Tests glyph selection, colors and the frame layout.
"""
import pytest
from minesweeper import (
    FLAGGED_MINE,
    FLAGGED_SAFE,
    MINE,
    SAFE,
    Board,
    BoardConfig,
    TerminalRenderer,
    Tile,
)


@pytest.fixture
def renderer() -> TerminalRenderer:
    """Create a terminal renderer."""
    return TerminalRenderer()


# ============================================================================
# Glyph Tests
# ============================================================================

class TestGlyphs:
    """Test per-tile glyphs."""

    @pytest.mark.parametrize(
        "tile, playing, over",
        [
            (MINE, "-", "X"),
            (SAFE, "-", "-"),
            (FLAGGED_SAFE, "F", "F"),
            (FLAGGED_MINE, "F", "!"),
            (Tile.revealed(0), " ", " "),
        ],
    )
    def test_glyph_table(
        self, renderer: TerminalRenderer, tile: Tile, playing: str, over: str
    ) -> None:
        """Glyphs depend on tile state and game over."""
        assert renderer.glyph(tile, game_over=False)[0] == playing
        assert renderer.glyph(tile, game_over=True)[0] == over

    @pytest.mark.parametrize("count", range(1, 9))
    def test_counts_show_digit(
        self, renderer: TerminalRenderer, count: int
    ) -> None:
        """Revealed counts show their digit either way."""
        tile = Tile.revealed(count)
        assert renderer.glyph(tile, game_over=False)[0] == str(count)
        assert renderer.glyph(tile, game_over=True)[0] == str(count)

    def test_mine_is_indistinguishable_while_playing(
        self, renderer: TerminalRenderer
    ) -> None:
        """Mines and safe tiles look identical until the game ends."""
        assert renderer.glyph(MINE, False) == renderer.glyph(SAFE, False)
        assert renderer.glyph(FLAGGED_MINE, False) == renderer.glyph(
            FLAGGED_SAFE, False
        )

    def test_styles(self, renderer: TerminalRenderer) -> None:
        """Exploded mines are red, flags yellow, counts colored."""
        assert renderer.glyph(MINE, True)[1] == "red"
        assert renderer.glyph(FLAGGED_MINE, True)[1] == "yellow"
        assert renderer.glyph(Tile.revealed(1), False)[1] == "blue"
        assert renderer.glyph(Tile.revealed(2), False)[1] == "green"


# ============================================================================
# Frame Tests
# ============================================================================

class TestFrame:
    """Test whole-board frames."""

    def test_unrevealed_frame(
        self, renderer: TerminalRenderer, corner_mine_board: Board
    ) -> None:
        """Headers, border and hidden tiles."""
        assert renderer.render(corner_mine_board).plain == (
            "     1  2  \n"
            "   +------\n"
            " 1 | -  -  \n"
            " 2 | -  -  \n"
        )

    def test_game_over_frame_shows_mines(
        self, renderer: TerminalRenderer, corner_mine_board: Board
    ) -> None:
        """Game over exposes mines and wrong flags stay F."""
        corner_mine_board.flag(1, 0)
        corner_mine_board.end_game()
        assert renderer.render(corner_mine_board).plain == (
            "     1  2  \n"
            "   +------\n"
            " 1 | X  F  \n"
            " 2 | -  -  \n"
        )

    def test_revealed_frame(
        self, renderer: TerminalRenderer, wide_board: Board
    ) -> None:
        """Zero tiles are blank and counts show as digits."""
        wide_board.reveal(0, 1)
        wide_board.flag(5, 0)
        lines = renderer.render(wide_board).plain.splitlines()
        assert lines[0] == "     1  2  3  4  5  6  "
        assert lines[1] == "   +" + "-" * 18
        assert lines[2] == " 1 | " + " " * 12 + "1  F  "
        assert lines[3] == " 2 | " + " " * 12 + "2  -  "
        assert lines[4] == " 3 | " + " " * 12 + "1  -  "

    def test_row_headers_are_right_aligned(
        self, renderer: TerminalRenderer
    ) -> None:
        """Two-digit row numbers line up with one-digit ones."""
        board = Board(BoardConfig(2, 10, 0))
        lines = renderer.render(board).plain.splitlines()
        assert lines[2].startswith(" 1 | ")
        assert lines[11].startswith("10 | ")

    def test_render_does_not_mutate(
        self, renderer: TerminalRenderer, default_board: Board
    ) -> None:
        """Rendering leaves the board untouched."""
        before = default_board.get_observation(reveal_mines=True)
        renderer.render(default_board)
        assert (default_board.get_observation(reveal_mines=True) == before).all()
        assert default_board.game_over is False

    def test_frame_is_styled(
        self, renderer: TerminalRenderer, corner_mine_board: Board
    ) -> None:
        """Frame carries color spans for the terminal."""
        text = renderer.render(corner_mine_board)
        styles = {str(span.style) for span in text.spans}
        assert "bright_black" in styles
        assert "white" in styles
