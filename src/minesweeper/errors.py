"""
Errors raised by the Minesweeper engine.

Only configuration defects and out-of-range tile indices are errors.
Disallowed moves (revealing a flagged tile, acting after the game ended)
are no-ops and never raise.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfig(MinesweeperError, ValueError):
    """Board configuration or mine layout cannot produce a valid board."""


class InvalidTileIndex(MinesweeperError, IndexError):
    """Tile index lies outside the board."""

    def __init__(self, index: int, num_tiles: int) -> None:
        super().__init__(
            f"Tile index {index} out of range (board has {num_tiles} tiles)"
        )
        self.index = index
        self.num_tiles = num_tiles
