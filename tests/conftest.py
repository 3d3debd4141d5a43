"""
Pytest configuration and shared fixtures.
"""
import io
import pytest
import sys
from pathlib import Path

from rich.console import Console

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Session, Tile, TileState


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 8x8 board with 10 mine placements."""
    return Board(seed=1234)


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 2x2 board with a single mine at (0, 0)."""
    return Board.from_mines(2, 2, [(0, 0)])


@pytest.fixture
def wide_board() -> Board:
    """
    Create a 6x3 board with mines in the rightmost column.

        . . . . . *
        . . . . . .
        . . . . . *
    """
    return Board.from_mines(6, 3, [(5, 0), (5, 2)])


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def safe_tile() -> Tile:
    """Create an unrevealed safe tile."""
    return Tile()


@pytest.fixture
def mine_tile() -> Tile:
    """Create an unrevealed mine tile."""
    return Tile(TileState.MINE)


@pytest.fixture
def numbered_tile() -> Tile:
    """Create a revealed tile with adjacent mines."""
    return Tile.revealed(3)


# ============================================================================
# Console Fixtures
# ============================================================================

def make_console() -> Console:
    """Create a console that records plain text instead of a terminal."""
    return Console(
        file=io.StringIO(),
        force_terminal=False,
        color_system=None,
        highlight=False,
        width=120,
    )


@pytest.fixture
def console() -> Console:
    """Console capturing session output."""
    return make_console()


@pytest.fixture
def error_console() -> Console:
    """Console capturing fatal diagnostics."""
    return make_console()


@pytest.fixture
def make_session(console: Console, error_console: Console):
    """Factory building a session over scripted input lines."""
    def _make(board: Board, *lines: str) -> Session:
        script = "".join(f"{line}\n" for line in lines)
        return Session(
            board,
            console=console,
            error_console=error_console,
            input_stream=io.StringIO(script),
        )
    return _make
