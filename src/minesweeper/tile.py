"""
Tile module for Minesweeper.

Represents individual tiles on the board with their content
(mine or safe with an adjacent-mine count) and player-visible state
(hidden, exposed or flagged). Tiles are immutable; state changes
produce new tiles.
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import FrozenSet, Optional


# ============================================================================
# Constants
# ============================================================================

class TileKind(Enum):
    """What a tile contains."""

    SAFE = auto()
    MINE = auto()


HIDDEN_OBSERVATION = -1
FLAGGED_OBSERVATION = -2
MINE_OBSERVATION = 9


# ============================================================================
# Public Projection
# ============================================================================

@dataclass(frozen=True)
class TileView:
    """
    What a presentation layer may know about a tile.

    ``kind`` and ``adjacent_mines`` are None until the tile is exposed.
    """

    exposed: bool
    flagged: bool
    kind: Optional[TileKind] = None
    adjacent_mines: Optional[int] = None


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass(frozen=True)
class Tile:
    """
    Represents a single tile in the Minesweeper grid.

    Attributes:
        kind: Whether this tile is safe or a mine. Never changes.
        adjacent: Indices of neighboring tiles, computed at generation.
        adjacent_mines: Count of mines among the neighbors for safe
            tiles, None for mines.
        is_exposed: Whether the tile has been revealed.
        is_flagged: Whether the player has flagged the tile.
    """

    kind: TileKind = TileKind.SAFE
    adjacent: FrozenSet[int] = frozenset()
    adjacent_mines: Optional[int] = 0
    is_exposed: bool = False
    is_flagged: bool = False

    def exposed(self) -> "Tile":
        """
        Return an exposed copy of this tile.

        The flag is cleared, since exposed tiles cannot carry one.
        """
        return replace(self, is_exposed=True, is_flagged=False)

    def flag_toggled(self) -> "Tile":
        """
        Return a copy with the flag toggled.

        Exposed tiles cannot be flagged and are returned as-is.
        """
        if self.is_exposed:
            return self
        return replace(self, is_flagged=not self.is_flagged)

    @property
    def is_mine(self) -> bool:
        """Check if tile is a mine."""
        return self.kind == TileKind.MINE

    @property
    def is_safe(self) -> bool:
        """Check if tile is safe."""
        return self.kind == TileKind.SAFE

    @property
    def is_blank(self) -> bool:
        """Check if tile is safe with no adjacent mines."""
        return self.is_safe and self.adjacent_mines == 0

    @property
    def is_hidden(self) -> bool:
        """Check if tile is neither exposed nor flagged."""
        return not self.is_exposed and not self.is_flagged

    def public_view(self) -> TileView:
        """Project the tile, withholding its content until exposed."""
        if not self.is_exposed:
            return TileView(exposed=False, flagged=self.is_flagged)
        return TileView(
            exposed=True,
            flagged=False,
            kind=self.kind,
            adjacent_mines=self.adjacent_mines,
        )

    def to_observation(self) -> int:
        """
        Convert tile to an observation value for agents.

        Returns:
            -1: Hidden tile
            -2: Flagged tile
            0-8: Exposed safe tile with adjacent mine count
            9: Exposed mine (game over state)
        """
        if self.is_flagged:
            return FLAGGED_OBSERVATION
        if not self.is_exposed:
            return HIDDEN_OBSERVATION
        if self.is_mine:
            return MINE_OBSERVATION
        return self.adjacent_mines
