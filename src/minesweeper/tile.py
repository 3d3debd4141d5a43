"""
Tile module for Minesweeper game.

A tile is one grid cell's current classification: an unrevealed mine or
safe cell, either of those under a flag, or a revealed cell with its
adjacent mine count.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class TileState(Enum):
    """The five states a tile can be in."""

    MINE = auto()
    SAFE = auto()
    FLAGGED_SAFE = auto()
    FLAGGED_MINE = auto()
    REVEALED = auto()


MAX_ADJACENT = 8

_FLAG_TOGGLES = {
    TileState.SAFE: TileState.FLAGGED_SAFE,
    TileState.FLAGGED_SAFE: TileState.SAFE,
    TileState.MINE: TileState.FLAGGED_MINE,
    TileState.FLAGGED_MINE: TileState.MINE,
}


# ============================================================================
# Tile Value
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Immutable state of a single tile.

    Attributes:
        state: Which of the five tile states this is.
        adjacent_mines: Neighboring mine count (0-8), only meaningful
            for revealed tiles.
    """

    state: TileState = TileState.SAFE
    adjacent_mines: int = 0

    def __post_init__(self) -> None:
        """Validate the adjacent count against the state."""
        if not 0 <= self.adjacent_mines <= MAX_ADJACENT:
            raise ValueError(
                f"Adjacent mine count must be 0-{MAX_ADJACENT}, "
                f"got {self.adjacent_mines}"
            )
        if self.state != TileState.REVEALED and self.adjacent_mines:
            raise ValueError("Only revealed tiles carry a mine count")

    @classmethod
    def revealed(cls, adjacent_mines: int) -> "Tile":
        """Create a revealed tile showing the given count."""
        return cls(TileState.REVEALED, adjacent_mines)

    def toggled_flag(self) -> "Tile":
        """
        Return this tile with its flag toggled.

        Safe and mine tiles swap with their flagged forms. Revealed tiles
        are returned unchanged.
        """
        if self.state == TileState.REVEALED:
            return self
        return Tile(_FLAG_TOGGLES[self.state])

    @property
    def is_mine(self) -> bool:
        """Check if tile holds a mine, flagged or not."""
        return self.state in (TileState.MINE, TileState.FLAGGED_MINE)

    @property
    def is_unresolved(self) -> bool:
        """Check if tile is an unflagged, unrevealed mine or safe cell."""
        return self.state in (TileState.MINE, TileState.SAFE)

    @property
    def is_flagged(self) -> bool:
        """Check if tile is flagged."""
        return self.state in (TileState.FLAGGED_SAFE, TileState.FLAGGED_MINE)

    @property
    def is_revealed(self) -> bool:
        """Check if tile is revealed."""
        return self.state == TileState.REVEALED

    def to_observation(self, reveal_mines: bool = False) -> int:
        """
        Convert tile to an observation value.

        Returns:
            -1: Unrevealed tile (mine or safe)
            -2: Flagged tile
            0-8: Revealed tile with adjacent mine count
            With reveal_mines, unflagged mines are 9 and flagged mines -3.
        """
        if self.state == TileState.REVEALED:
            return self.adjacent_mines
        if reveal_mines and self.state == TileState.MINE:
            return 9
        if reveal_mines and self.state == TileState.FLAGGED_MINE:
            return -3
        if self.is_flagged:
            return -2
        return -1


MINE = Tile(TileState.MINE)
SAFE = Tile(TileState.SAFE)
FLAGGED_SAFE = Tile(TileState.FLAGGED_SAFE)
FLAGGED_MINE = Tile(TileState.FLAGGED_MINE)
