"""
Text rendering of a Minesweeper game.
"""
from typing import Optional

from .game import GameState
from .tile import Tile


HIDDEN_CHAR = "."
FLAG_CHAR = "F"
MINE_CHAR = "*"
BLANK_CHAR = " "


def tile_char(tile: Tile, show_content: bool = False) -> str:
    """
    Character for a single tile.

    Args:
        tile: Tile to draw.
        show_content: Draw mines under hidden tiles as well.
    """
    if tile.is_flagged:
        return FLAG_CHAR
    if not tile.is_exposed and not (show_content and tile.is_mine):
        return HIDDEN_CHAR
    if tile.is_mine:
        return MINE_CHAR
    if tile.adjacent_mines == 0:
        return BLANK_CHAR
    return str(tile.adjacent_mines)


def render_text(state: GameState, reveal_all: Optional[bool] = None) -> str:
    """
    Render board as ASCII string.

    Hidden tiles stay hidden while the game is active. Once the game is
    over, won or lost, the remaining mines are drawn too.

    Args:
        state: Game to draw.
        reveal_all: Force mines to be shown (True) or hidden (False)
            regardless of status.

    Returns:
        One line per row, tiles separated by spaces.
    """
    show_mines = not state.is_active if reveal_all is None else reveal_all
    width = state.config.width
    lines = []
    for row in range(state.config.height):
        row_tiles = state.board.tiles[row * width:(row + 1) * width]
        lines.append(
            " ".join(tile_char(tile, show_mines) for tile in row_tiles) + " "
        )
    return "\n".join(lines)
