"""
Board module for Minesweeper.

Implements level configuration, mine placement and the immutable
board of tiles with precomputed adjacency and mine counts.
"""
import random
from dataclasses import dataclass, replace
from typing import (
    Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Set, Tuple,
)

from .errors import InvalidConfig, InvalidTileIndex
from .geometry import adjacent_indexes, is_valid_index
from .tile import Tile, TileKind


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 9
    height: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for value in (self.width, self.height, self.num_mines):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfig("Board dimensions and mines must be integers")
        if self.width < 1 or self.height < 1:
            raise InvalidConfig("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfig("Number of mines cannot be negative")
        max_mines = self.num_tiles - 1
        if self.num_mines > max_mines:
            raise InvalidConfig(f"Too many mines (max {max_mines})")

    @property
    def num_tiles(self) -> int:
        """Total number of tiles on the board."""
        return self.width * self.height

    @property
    def num_safe(self) -> int:
        """Number of tiles that are not mines."""
        return self.num_tiles - self.num_mines


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)
CLASSIC = BoardConfig(10, 10, 10)

LEVELS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
    "classic": CLASSIC,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable Minesweeper board.

    Tiles are stored in row-major order. Changing a tile produces a new
    board via ``with_tiles``; tile kind, adjacency and mine counts are
    fixed when the board is built.
    """

    config: BoardConfig
    tiles: Tuple[Tile, ...]

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self.tiles)

    def tile(self, index: int) -> Tile:
        """
        Get tile at a flat index.

        Raises:
            InvalidTileIndex: If index is off the board.
        """
        self.check_index(index)
        return self.tiles[index]

    def check_index(self, index: int) -> None:
        """Raise InvalidTileIndex unless index addresses a tile."""
        if not is_valid_index(index, self.config.width, self.config.height):
            raise InvalidTileIndex(index, len(self.tiles))

    def with_tiles(self, updates: Mapping[int, Tile]) -> "Board":
        """
        Return a copy of the board with some tiles replaced.

        Args:
            updates: Mapping of index to replacement tile.

        Returns:
            New board; this one is left untouched.
        """
        if not updates:
            return self
        tiles = list(self.tiles)
        for index, tile in updates.items():
            tiles[index] = tile
        return replace(self, tiles=tuple(tiles))

    # ========================================================================
    # Queries
    # ========================================================================

    def mine_indices(self) -> FrozenSet[int]:
        """Indices of all mines."""
        return frozenset(i for i, tile in enumerate(self.tiles) if tile.is_mine)

    def safe_indices(self) -> FrozenSet[int]:
        """Indices of all safe tiles."""
        return frozenset(i for i, tile in enumerate(self.tiles) if tile.is_safe)

    def exposed_indices(self) -> FrozenSet[int]:
        """Indices of all exposed tiles."""
        return frozenset(
            i for i, tile in enumerate(self.tiles) if tile.is_exposed
        )

    def flagged_indices(self) -> FrozenSet[int]:
        """Indices of all flagged tiles."""
        return frozenset(
            i for i, tile in enumerate(self.tiles) if tile.is_flagged
        )


# ============================================================================
# Generation
# ============================================================================

def place_mines(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> FrozenSet[int]:
    """
    Choose distinct mine indices uniformly at random.

    Draws a random index, discards it if already chosen and repeats
    until the configured number of mines is reached.

    Args:
        config: Board configuration.
        rng: Random source; a fresh unseeded one if omitted.

    Returns:
        Frozen set of mine indices.
    """
    rng = rng or random.Random()
    mines: Set[int] = set()
    while len(mines) < config.num_mines:
        mines.add(rng.randrange(config.num_tiles))
    return frozenset(mines)


def build_board(config: BoardConfig, mine_indices: Iterable[int]) -> Board:
    """
    Build an all-hidden board from a known mine layout.

    Args:
        config: Board configuration.
        mine_indices: Indices that hold mines.

    Returns:
        Board with adjacency sets and mine counts filled in.

    Raises:
        InvalidConfig: If the layout does not fit the configuration.
    """
    mine_list: List[int] = list(mine_indices)
    mines = frozenset(mine_list)
    if len(mines) != len(mine_list):
        raise InvalidConfig("Mine layout contains duplicate indices")
    if len(mines) != config.num_mines:
        raise InvalidConfig(
            f"Mine layout has {len(mines)} mines, expected {config.num_mines}"
        )
    for index in mines:
        if not is_valid_index(index, config.width, config.height):
            raise InvalidConfig(f"Mine index {index} is off the board")

    tiles = []
    for index in range(config.num_tiles):
        adjacent = adjacent_indexes(index, config.width, config.height)
        if index in mines:
            tiles.append(
                Tile(kind=TileKind.MINE, adjacent=adjacent, adjacent_mines=None)
            )
        else:
            tiles.append(
                Tile(
                    kind=TileKind.SAFE,
                    adjacent=adjacent,
                    adjacent_mines=len(adjacent & mines),
                )
            )
    return Board(config=config, tiles=tuple(tiles))


def generate_board(
    config: BoardConfig, rng: Optional[random.Random] = None
) -> Board:
    """
    Generate a fresh board with randomly placed mines.

    Args:
        config: Board configuration.
        rng: Random source; pass a seeded one for reproducible boards.

    Returns:
        All-hidden, all-unflagged board.
    """
    return build_board(config, place_mines(config, rng))
