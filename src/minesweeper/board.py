"""
Board module for Minesweeper game.

Implements the game board with mine placement, the first-reveal safety
clear, flood-fill revealing, flagging and win detection.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .tile import MINE, SAFE, Tile, TileState

Coordinate = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class RevealOutcome(Enum):
    """Result of a reveal command."""

    CONTINUE = auto()
    EXPLODED = auto()


# E, W, S, N, SE, NE, SW, NW
ADJACENT_OFFSETS: Tuple[Coordinate, ...] = (
    (1, 0), (-1, 0), (0, 1), (0, -1),
    (1, 1), (1, -1), (-1, 1), (-1, -1),
)


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Number of mine placements to make.
        allow_duplicate_placement: Draw each mine position independently,
            so repeated draws land on the same cell and fewer mines than
            requested may end up on the board. When False, exactly
            num_mines distinct cells are mined.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10
    allow_duplicate_placement: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


DEFAULT = BoardConfig(8, 8, 10)


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of tiles and every state transition on it. Coordinates
    are 0-based (x, y) with x the column; callers are expected to
    bounds-check with in_bounds() before calling reveal() or flag().
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    game_over: bool = False
    _grid: List[List[Tile]] = field(default_factory=list, repr=False)
    _first_reveal_pending: bool = True
    _rng: random.Random = field(
        default_factory=random.Random, init=False, repr=False
    )

    def __post_init__(self) -> None:
        """Create the grid and lay the mines."""
        self._rng = random.Random(self.seed)
        self._init_grid()
        self._place_mines()

    @classmethod
    def from_mines(
        cls,
        width: int,
        height: int,
        mines: Iterable[Coordinate],
        seed: Optional[int] = None,
    ) -> "Board":
        """
        Build a board with mines at exactly the given positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (x, y) positions to mine. Repeats are ignored.
            seed: Seed kept on the board for reference.

        Returns:
            Board with no randomly placed mines.
        """
        positions = set(mines)
        board = cls(BoardConfig(width, height, 0), seed=seed)
        for x, y in positions:
            if not board.in_bounds(x, y):
                raise ValueError(f"Mine position {(x, y)} not on board")
            board._grid[y][x] = MINE
        board.config = BoardConfig(
            width, height, len(positions), allow_duplicate_placement=False
        )
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of safe tiles."""
        self._grid = [
            [SAFE for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """Place mines uniformly at random according to the config."""
        if self.config.allow_duplicate_placement:
            for _ in range(self.config.num_mines):
                x = self._rng.randrange(self.config.width)
                y = self._rng.randrange(self.config.height)
                self._grid[y][x] = MINE
            return

        positions = [
            (x, y)
            for y in range(self.config.height)
            for x in range(self.config.width)
        ]
        for x, y in self._rng.sample(positions, self.config.num_mines):
            self._grid[y][x] = MINE

    def _count_adjacent_mines(self, x: int, y: int) -> int:
        """Count neighbors currently holding a mine, flagged or not."""
        return sum(
            1 for nx, ny in self.get_adjacent(x, y)
            if self._grid[ny][nx].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def get_adjacent(self, x: int, y: int) -> List[Coordinate]:
        """
        Get the on-board neighbors of a position.

        Neighbors are listed in ADJACENT_OFFSETS order, skipping any that
        fall outside the board. The result depends only on the position
        and board size, never on tile state.

        Args:
            x: Column of center tile.
            y: Row of center tile.

        Returns:
            List of (x, y) tuples, 3 for a corner and at most 8.
        """
        neighbors = []
        for delta_x, delta_y in ADJACENT_OFFSETS:
            new_x = x + delta_x
            new_y = y + delta_y
            if self.in_bounds(new_x, new_y):
                neighbors.append((new_x, new_y))
        return neighbors

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> RevealOutcome:
        """
        Reveal the tile at the given position.

        The first reveal of a game forces the tile and its neighbors to
        safe, discarding any mines there. Revealing a mine explodes
        without touching the board. Revealing a safe tile flood-fills
        outward through zero-count tiles. Revealed and flagged tiles are
        left alone.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            EXPLODED if a mine was revealed, CONTINUE otherwise.
        """
        if self._first_reveal_pending:
            self._clear_first_reveal_area(x, y)

        state = self._grid[y][x].state
        if state == TileState.MINE:
            return RevealOutcome.EXPLODED
        if state == TileState.SAFE:
            self._flood_reveal(x, y)
        return RevealOutcome.CONTINUE

    def _clear_first_reveal_area(self, x: int, y: int) -> None:
        """Force the first revealed tile and its neighbors to safe."""
        self._grid[y][x] = SAFE
        for nx, ny in self.get_adjacent(x, y):
            self._grid[ny][nx] = SAFE
        self._first_reveal_pending = False

    def _flood_reveal(self, x: int, y: int) -> None:
        """Reveal from a safe tile, expanding through zero-count tiles."""
        to_reveal = [(x, y)]
        while to_reveal:
            cx, cy = to_reveal.pop()
            # A tile can be queued by two zero-count neighbors.
            if self._grid[cy][cx].is_revealed:
                continue
            count = self._count_adjacent_mines(cx, cy)
            self._grid[cy][cx] = Tile.revealed(count)
            if count == 0:
                for nx, ny in self.get_adjacent(cx, cy):
                    if self._grid[ny][nx].is_unresolved:
                        to_reveal.append((nx, ny))

    def flag(self, x: int, y: int) -> None:
        """
        Toggle the flag on a tile.

        Safe and mine tiles swap with their flagged forms; revealed
        tiles are unaffected.
        """
        self._grid[y][x] = self._grid[y][x].toggled_flag()

    def is_solved(self) -> bool:
        """
        Check if no tile is left as an unflagged mine or safe tile.

        A flagged safe tile does not block a win, and neither does a
        flagged mine, so a player can win by flagging tiles instead of
        revealing them. Changing this is a rules change, not a bug fix.
        """
        return not any(
            tile.is_unresolved for row in self._grid for tile in row
        )

    def end_game(self) -> None:
        """Mark the game as over so renderers show the mine layout."""
        self.game_over = True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Get number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Get number of rows."""
        return self.config.height

    @property
    def first_reveal_pending(self) -> bool:
        """Check if the first-reveal safety clear is still to come."""
        return self._first_reveal_pending

    @property
    def mine_count(self) -> int:
        """Get number of mines actually on the board, flagged or not."""
        return sum(1 for _, _, tile in self.tiles() if tile.is_mine)

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        """Get tile at position, or None if invalid."""
        if not self.in_bounds(x, y):
            return None
        return self._grid[y][x]

    def tiles(self) -> Iterator[Tuple[int, int, Tile]]:
        """Yield (x, y, tile) for every tile, row by row."""
        for y, row in enumerate(self._grid):
            for x, tile in enumerate(row):
                yield x, y, tile

    def get_observation(self, reveal_mines: bool = False) -> np.ndarray:
        """
        Get board state as numpy array.

        Args:
            reveal_mines: Encode mine positions instead of hiding them.

        Returns:
            2D numpy array indexed [y, x] where:
                -1 = unrevealed
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = mine, -3 = flagged mine (only with reveal_mines)
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for x, y, tile in self.tiles():
            obs[y, x] = tile.to_observation(reveal_mines)
        return obs
